"""Application errors rendered as the API error envelope."""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map to a client-facing response."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing, blank or mismatched request fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AppError):
    """Bad credentials or an unusable bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class AuthzError(AppError):
    """Authenticated user acting on a record they do not own."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Duplicate account or email."""

    status_code = status.HTTP_400_BAD_REQUEST
