"""Followship model."""

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint

from simple_twitter.database import Base
from simple_twitter.models.mixins import TimestampMixin


class Followship(Base, TimestampMixin):
    """Directed follow edge: follower -> following."""

    __tablename__ = "followships"
    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_followships_follower_following"),
    )

    id = Column(Integer, primary_key=True, index=True)
    follower_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    following_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
