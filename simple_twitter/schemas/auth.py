"""Authentication schemas."""

from pydantic import BaseModel

from simple_twitter.schemas.user import UserResponse


class UserLogin(BaseModel):
    """User login request.

    Both fields default to blank so that a missing field fails the same
    "all fields required" check as an empty one.
    """

    email: str = ""
    password: str = ""


class LoginData(BaseModel):
    """Token plus the signed-in user."""

    token: str
    user: UserResponse
