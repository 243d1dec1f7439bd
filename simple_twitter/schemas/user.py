"""User schemas."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from simple_twitter.models.enums import Role
from simple_twitter.schemas.common import CamelModel


def blank_to_none(value):
    """Treat a blank email like a missing one so the service reports it."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class UserRegister(CamelModel):
    """User registration request."""

    account: str | None = Field(None, max_length=50)
    name: str | None = Field(None, max_length=50)
    email: EmailStr | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)
    check_password: str | None = Field(None, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, value):
        return blank_to_none(value)


class AccountUpdate(CamelModel):
    """Partial account update.

    Fields left out of the request body are not part of ``model_fields_set``
    and keep their stored values.
    """

    account: str | None = Field(None, max_length=50)
    name: str | None = Field(None, max_length=50)
    email: EmailStr | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)
    check_password: str | None = Field(None, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, value):
        return blank_to_none(value)


class UserSummary(CamelModel):
    """Minimal user card used in follower lists."""

    id: int
    account: str
    name: str
    avatar: str | None = None


class UserResponse(CamelModel):
    """User record without the password hash."""

    id: int
    account: str
    email: str
    name: str
    role: Role
    avatar: str | None = None
    cover: str | None = None
    introduction: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AccountResponse(CamelModel):
    """Result of an account update."""

    id: int
    account: str
    email: str
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProfileResponse(CamelModel):
    """Result of a profile update."""

    id: int
    account: str
    email: str
    name: str
    avatar: str | None = None
    cover: str | None = None
    introduction: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TweetResponse(CamelModel):
    id: int
    user_id: int
    description: str
    created_at: datetime | None = None


class ReplyResponse(CamelModel):
    id: int
    user_id: int
    tweet_id: int
    comment: str
    created_at: datetime | None = None


class LikeResponse(CamelModel):
    id: int
    user_id: int
    tweet_id: int
    created_at: datetime | None = None


class UserProfile(CamelModel):
    """Full public profile of a single user."""

    id: int
    account: str
    email: str
    name: str
    role: Role
    avatar: str | None = None
    cover: str | None = None
    introduction: str | None = None
    tweets: list[TweetResponse] = []
    replies: list[ReplyResponse] = []
    likes: list[LikeResponse] = []
    followers: list[UserSummary] = []
    followings: list[UserSummary] = []
    is_followed: bool | None = None


class RankedUser(UserSummary):
    """User card annotated for the follower ranking."""

    follower_count: int
    is_followed: bool
