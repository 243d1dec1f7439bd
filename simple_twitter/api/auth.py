"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from simple_twitter.api.dependencies import get_current_user
from simple_twitter.database import get_db
from simple_twitter.models.user import User
from simple_twitter.schemas.auth import LoginData, UserLogin
from simple_twitter.schemas.common import SuccessResponse
from simple_twitter.schemas.user import UserResponse
from simple_twitter.services.auth import authenticate_user, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=SuccessResponse[LoginData])
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)
    token = create_access_token(user)
    logger.info(f"User {user.id} logged in")

    return SuccessResponse(data=LoginData(token=token, user=UserResponse.model_validate(user)))


@router.get("/me", response_model=SuccessResponse[UserResponse])
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return SuccessResponse(data=UserResponse.model_validate(current_user))
