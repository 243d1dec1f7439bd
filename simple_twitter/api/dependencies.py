"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from simple_twitter.database import get_db
from simple_twitter.exceptions import AuthError
from simple_twitter.models.user import User
from simple_twitter.services.auth import decode_access_token
from simple_twitter.services.image_upload import ImgurUploader
from simple_twitter.services.user_service import UserService

security = HTTPBearer(auto_error=False)

INVALID_CREDENTIALS = "Invalid authentication credentials"


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise AuthError(INVALID_CREDENTIALS)

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise AuthError(INVALID_CREDENTIALS)

    user_id = payload.get("sub")
    if user_id is None:
        raise AuthError(INVALID_CREDENTIALS)

    user = db.query(User).filter(User.id == int(user_id)).first()
    if user is None:
        raise AuthError("User not found")

    return user


def get_image_uploader() -> ImgurUploader:
    """Get image upload client instance."""
    return ImgurUploader()


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
    uploader: Annotated[ImgurUploader, Depends(get_image_uploader)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db, uploader)
