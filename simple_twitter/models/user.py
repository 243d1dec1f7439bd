"""User model."""

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import relationship

from simple_twitter.database import Base
from simple_twitter.models.enums import Role
from simple_twitter.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and the public profile."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    account = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(50), nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash, never plaintext
    role = Column(
        SAEnum(Role, native_enum=False, length=20, values_callable=lambda e: [r.value for r in e]),
        nullable=False,
        default=Role.USER,
    )
    avatar = Column(String(255), nullable=True)
    cover = Column(String(255), nullable=True)
    introduction = Column(Text, nullable=True)

    # Relationships
    tweets = relationship("Tweet", back_populates="user", cascade="all, delete-orphan")
    replies = relationship("Reply", back_populates="user", cascade="all, delete-orphan")
    likes = relationship("Like", back_populates="user", cascade="all, delete-orphan")
    followers = relationship(
        "User",
        secondary="followships",
        primaryjoin="User.id == Followship.following_id",
        secondaryjoin="User.id == Followship.follower_id",
        viewonly=True,
    )
    followings = relationship(
        "User",
        secondary="followships",
        primaryjoin="User.id == Followship.follower_id",
        secondaryjoin="User.id == Followship.following_id",
        viewonly=True,
    )
