"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from email_validator import EmailNotValidError, validate_email
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from simple_twitter.config import get_settings
from simple_twitter.exceptions import AuthError, ValidationError
from simple_twitter.models.user import User
from simple_twitter.schemas.user import UserResponse

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALL_FIELDS_REQUIRED = "所有欄位都是必填！"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def token_claims(user: User) -> dict[str, Any]:
    """Non-secret user fields embedded in the access token."""
    return UserResponse.model_validate(user).model_dump(mode="json", by_alias=True)


def create_access_token(user: User) -> str:
    """Create a JWT access token carrying a copy of the user's public fields."""
    expire = datetime.now(UTC) + timedelta(days=settings.jwt_expiration_days)
    to_encode = {
        **token_claims(user),
        "sub": str(user.id),
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def normalize_email(email: str) -> str:
    """Normalize an address the same way EmailStr does on registration."""
    return validate_email(email.strip(), check_deliverability=False).normalized


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a front-site user by email and password.

    Raises ValidationError for blank input before touching the database,
    and AuthError for unknown accounts, admin accounts and wrong passwords.
    """
    if not email.strip() or not password.strip():
        raise ValidationError(ALL_FIELDS_REQUIRED)

    try:
        email = normalize_email(email)
    except EmailNotValidError:
        logger.info(f"Login failed: malformed email {email!r}")
        raise AuthError("User doesn't exist!") from None

    user = get_user_by_email(db, email)
    if not user:
        logger.info(f"Login failed: no user for {email}")
        raise AuthError("User doesn't exist!")
    # Admins sign in elsewhere; answer as if the account did not exist
    if not user.role.can_use_front_site():
        logger.info(f"Login refused for user {user.id} with role {user.role.value}")
        raise AuthError("帳號不存在")
    if not verify_password(password, user.password):
        logger.info(f"Login failed: wrong password for user {user.id}")
        raise AuthError("密碼錯誤！")
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_account(db: Session, account: str) -> User | None:
    """Get a user by account handle."""
    return db.query(User).filter(User.account == account).first()
