# File: diary_backend/core/errors.py

"""
Error taxonomy for the diary API.

Every error carries the message returned to the client and the HTTP
status it maps to. The mapping itself lives in ``diary_backend.main``.
"""

from fastapi import status


class DiaryError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DiaryError):
    """Bad input shape or constraint violation."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(DiaryError):
    """A unique field (email) is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already registered"


class AuthError(DiaryError):
    """Bad credentials or OTP."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class TokenError(AuthError):
    """Missing, malformed, forged or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class NotFoundError(DiaryError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InternalError(DiaryError):
    pass
