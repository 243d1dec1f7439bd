"""Tweet, reply and like models."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from simple_twitter.database import Base
from simple_twitter.models.mixins import TimestampMixin


class Tweet(Base, TimestampMixin):
    """A post authored by a user."""

    __tablename__ = "tweets"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    description = Column(String(140), nullable=False)

    # Relationships
    user = relationship("User", back_populates="tweets")
    replies = relationship("Reply", back_populates="tweet", cascade="all, delete-orphan")
    likes = relationship("Like", back_populates="tweet", cascade="all, delete-orphan")


class Reply(Base, TimestampMixin):
    """A comment left by a user on a tweet."""

    __tablename__ = "replies"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    tweet_id = Column(Integer, ForeignKey("tweets.id"), nullable=False, index=True)
    comment = Column(Text, nullable=False)

    # Relationships
    user = relationship("User", back_populates="replies")
    tweet = relationship("Tweet", back_populates="replies")


class Like(Base, TimestampMixin):
    """A user liking a tweet."""

    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    tweet_id = Column(Integer, ForeignKey("tweets.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="likes")
    tweet = relationship("Tweet", back_populates="likes")
