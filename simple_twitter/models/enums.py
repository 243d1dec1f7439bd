"""Enums for model fields."""

from enum import Enum


class Role(str, Enum):
    """Account roles."""

    USER = "user"
    ADMIN = "admin"

    def can_use_front_site(self) -> bool:
        """Check if this role may sign in to the public site."""
        return self == Role.USER
