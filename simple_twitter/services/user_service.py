"""User service: registration, profile lookup, ranking and updates."""

import logging
from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from simple_twitter.exceptions import AuthzError, ConflictError, NotFoundError, ValidationError
from simple_twitter.models.user import User
from simple_twitter.schemas.user import AccountUpdate, RankedUser, UserProfile, UserRegister
from simple_twitter.services.auth import (
    ALL_FIELDS_REQUIRED,
    get_password_hash,
    get_user_by_account,
    get_user_by_email,
)
from simple_twitter.services.image_upload import ALLOWED_IMAGE_TYPES, ImageFile

logger = logging.getLogger(__name__)

PASSWORD_MISMATCH = "密碼與密碼確認不相同！"
USER_NOT_FOUND = "找不到使用者！"
NOT_OWNER = "無權限更改此使用者！"

# Account columns that may be changed but never cleared
REQUIRED_ACCOUNT_FIELDS = ("account", "name", "email", "password")


class ImageUploader(Protocol):
    async def upload(self, image: ImageFile) -> str: ...


def _followed_ids(user: User | None) -> set[int] | None:
    if user is None:
        return None
    return {f.id for f in user.followings}


class UserService:
    """Service for user account operations."""

    def __init__(self, db: Session, uploader: ImageUploader | None = None):
        self.db = db
        self.uploader = uploader

    def register(self, data: UserRegister) -> User:
        """Create a user after checking required fields and uniqueness.

        Email is checked before account so a doubly-taken registration
        reports the email conflict.
        """
        fields = (data.account, data.name, data.email, data.password, data.check_password)
        if any(not value or not value.strip() for value in fields):
            raise ValidationError(ALL_FIELDS_REQUIRED)
        if data.password != data.check_password:
            raise ValidationError(PASSWORD_MISMATCH)

        if get_user_by_email(self.db, data.email):
            raise ConflictError("email 已重複註冊！")
        if get_user_by_account(self.db, data.account):
            raise ConflictError("account 已重複註冊！")

        user = User(
            account=data.account,
            name=data.name,
            email=data.email,
            password=get_password_hash(data.password),
        )
        self.db.add(user)
        self._commit_unique("account 或 email 已重複註冊！")
        self.db.refresh(user)
        logger.info(f"Registered user {user.id} ({user.account})")
        return user

    def get_profile(self, user_id: int, requester: User | None) -> UserProfile:
        """Get a user's full profile, flagged with whether the requester follows them."""
        user = (
            self.db.query(User)
            .options(
                selectinload(User.tweets),
                selectinload(User.replies),
                selectinload(User.likes),
                selectinload(User.followers),
                selectinload(User.followings),
            )
            .filter(User.id == user_id)
            .first()
        )
        if not user:
            raise NotFoundError(USER_NOT_FOUND)

        profile = UserProfile.model_validate(user)
        followed = _followed_ids(requester)
        profile.is_followed = None if followed is None else user.id in followed
        return profile

    def list_users(self, requester: User, top: int | None = None) -> list[RankedUser]:
        """List users ranked by follower count, most followed first.

        Ties keep ascending id order. A missing or zero ``top`` returns everyone.
        """
        users = self.db.query(User).options(selectinload(User.followers)).order_by(User.id).all()
        followed = _followed_ids(requester) or set()

        ranked = [
            RankedUser(
                id=user.id,
                account=user.account,
                name=user.name,
                avatar=user.avatar,
                follower_count=len(user.followers),
                is_followed=user.id in followed,
            )
            for user in users
        ]
        ranked.sort(key=lambda u: u.follower_count, reverse=True)
        return ranked[:top] if top else ranked

    def get_owned_user(self, user_id: int, requester: User) -> User:
        """Get a user the requester is allowed to modify."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError(USER_NOT_FOUND)
        if requester.id != user.id:
            logger.warning(f"User {requester.id} tried to modify user {user_id}")
            raise AuthzError(NOT_OWNER)
        return user

    def update_account(self, user_id: int, requester: User, patch: AccountUpdate) -> User:
        """Apply a partial account update.

        Only fields present in the request are changed. Present-but-empty
        values for account, name, email or password are rejected.
        """
        user = self.get_owned_user(user_id, requester)
        changes = patch.model_dump(include=patch.model_fields_set - {"check_password"})

        for field in REQUIRED_ACCOUNT_FIELDS:
            if field in changes and (changes[field] is None or not str(changes[field]).strip()):
                raise ValidationError(f"{field} 不可為空白！")

        if "account" in changes:
            other = get_user_by_account(self.db, changes["account"])
            if other and other.id != user.id:
                raise ConflictError("account與其他使用者重複！")
        if "email" in changes:
            other = get_user_by_email(self.db, changes["email"])
            if other and other.id != user.id:
                raise ConflictError("email與其他使用者重複！")
        if "password" in changes:
            if changes["password"] != patch.check_password:
                raise ValidationError(PASSWORD_MISMATCH)
            changes["password"] = get_password_hash(changes["password"])

        for field, value in changes.items():
            setattr(user, field, value)
        self._commit_unique("account 或 email 與其他使用者重複！")
        self.db.refresh(user)
        logger.info(f"Updated account fields {sorted(changes)} for user {user.id}")
        return user

    async def update_profile(
        self,
        user_id: int,
        requester: User,
        name: str | None,
        introduction: str | None = None,
        avatar: ImageFile | None = None,
        cover: ImageFile | None = None,
    ) -> User:
        """Update name, introduction and images.

        Images that are not supplied keep their current URLs, as does an
        introduction of ``None``.
        """
        if not name or not name.strip():
            raise ValidationError("name是必填！")
        user = self.get_owned_user(user_id, requester)

        images = {"avatar": avatar, "cover": cover}
        for field, image in images.items():
            if image is not None and image.content_type not in ALLOWED_IMAGE_TYPES:
                raise ValidationError(f"{field} 必須是圖片檔！")

        for field, image in images.items():
            if image is not None:
                if self.uploader is None:
                    raise ValueError("No image uploader configured")
                setattr(user, field, await self.uploader.upload(image))

        user.name = name
        if introduction is not None:
            user.introduction = introduction
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Updated profile for user {user.id}")
        return user

    def _commit_unique(self, message: str) -> None:
        """Commit, translating a unique-constraint violation into a conflict."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Unique constraint violated on commit: {e.orig}")
            raise ConflictError(message) from e
