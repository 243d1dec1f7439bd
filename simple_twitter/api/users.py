"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from simple_twitter.api.dependencies import get_current_user, get_user_service
from simple_twitter.models.user import User
from simple_twitter.schemas.common import SuccessResponse
from simple_twitter.schemas.user import (
    AccountResponse,
    AccountUpdate,
    ProfileResponse,
    RankedUser,
    UserProfile,
    UserRegister,
    UserResponse,
)
from simple_twitter.services.image_upload import ImageFile
from simple_twitter.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


async def read_image(upload: UploadFile | None) -> ImageFile | None:
    """Read an optional multipart file into memory."""
    if upload is None or not upload.filename:
        return None
    return ImageFile(
        filename=upload.filename,
        content_type=upload.content_type,
        data=await upload.read(),
    )


@router.post("", response_model=SuccessResponse[UserResponse])
def register(
    user_data: UserRegister,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user."""
    user = service.register(user_data)
    return SuccessResponse(data=UserResponse.model_validate(user))


@router.get("", response_model=SuccessResponse[list[RankedUser]])
def list_users(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
    top: Annotated[int | None, Query(ge=0)] = None,
):
    """List users ranked by follower count, optionally only the first ``top``."""
    return SuccessResponse(data=service.list_users(current_user, top))


@router.get("/{user_id}", response_model=SuccessResponse[UserProfile])
def get_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user's profile with tweets, replies, likes and follow lists."""
    return SuccessResponse(data=service.get_profile(user_id, current_user))


@router.put("/{user_id}/account", response_model=SuccessResponse[AccountResponse])
def update_account(
    user_id: int,
    patch: AccountUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update account, name, email or password. Omitted fields are unchanged."""
    user = service.update_account(user_id, current_user, patch)
    return SuccessResponse(data=AccountResponse.model_validate(user))


@router.put("/{user_id}/profile", response_model=SuccessResponse[ProfileResponse])
async def update_profile(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
    name: Annotated[str | None, Form()] = None,
    introduction: Annotated[str | None, Form()] = None,
    avatar: Annotated[UploadFile | None, File()] = None,
    cover: Annotated[UploadFile | None, File()] = None,
):
    """Update name, introduction, avatar and cover.

    Note: This endpoint must remain async because UploadFile.read() is async.
    """
    user = await service.update_profile(
        user_id,
        current_user,
        name=name,
        introduction=introduction,
        avatar=await read_image(avatar),
        cover=await read_image(cover),
    )
    return SuccessResponse(data=ProfileResponse.model_validate(user))
