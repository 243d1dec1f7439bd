"""SQLAlchemy models."""

from simple_twitter.models.enums import Role
from simple_twitter.models.followship import Followship
from simple_twitter.models.tweet import Like, Reply, Tweet
from simple_twitter.models.user import User

__all__ = [
    "User",
    "Role",
    "Followship",
    "Tweet",
    "Reply",
    "Like",
]
