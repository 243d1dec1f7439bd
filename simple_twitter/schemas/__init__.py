"""Pydantic schemas for API requests and responses."""

from simple_twitter.schemas.auth import LoginData, UserLogin
from simple_twitter.schemas.common import ErrorResponse, SuccessResponse
from simple_twitter.schemas.user import (
    AccountResponse,
    AccountUpdate,
    ProfileResponse,
    RankedUser,
    UserProfile,
    UserRegister,
    UserResponse,
    UserSummary,
)

__all__ = [
    "UserLogin",
    "LoginData",
    "SuccessResponse",
    "ErrorResponse",
    "UserRegister",
    "AccountUpdate",
    "UserResponse",
    "UserSummary",
    "AccountResponse",
    "ProfileResponse",
    "UserProfile",
    "RankedUser",
]
