# File: diary_backend/services/auth_service.py

"""
Authentication flow: signup, OTP verification and login.

Each step is a single store round-trip; failures are raised as the
errors in ``diary_backend.core.errors`` and mapped to HTTP by the app.
"""

import logging

from sqlalchemy.orm import Session

from diary_backend.core.config import Settings
from diary_backend.core.errors import AuthError, ConflictError, ValidationError
from diary_backend.core.security import create_access_token, hash_password, verify_password
from diary_backend.schemas.user import LoginRequest, SignupRequest, VerifyRequest
from diary_backend.services import user_store
from diary_backend.services.otp_service import OtpChannel, generate_otp

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 3


def signup(
    db: Session,
    payload: SignupRequest,
    *,
    settings: Settings,
    channel: OtpChannel,
) -> None:
    """
    Register an unverified user and send them a fresh OTP.

    Raises:
        ValidationError: password shorter than MIN_PASSWORD_LENGTH.
        ConflictError: email already registered.
    """
    if len(payload.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("Password minimum 3 digits")

    if user_store.get_user_by_email(db, payload.email) is not None:
        raise ConflictError("Email already registered")

    otp = generate_otp()
    user_store.create_user(
        db,
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        password_hash=hash_password(payload.password, rounds=settings.bcrypt_rounds),
        otp=otp,
    )
    logger.info("Registered %s, awaiting OTP confirmation", payload.email)

    channel.send(payload.email, otp)


def verify(db: Session, payload: VerifyRequest) -> None:
    user = user_store.get_user_by_email(db, payload.email)

    # A cleared OTP never matches, not even an absent one
    if user is None or payload.otp is None or user.otp != payload.otp:
        raise AuthError("Invalid OTP")

    user_store.mark_verified(db, user)
    logger.info("Verified %s", payload.email)


def login(db: Session, payload: LoginRequest, *, settings: Settings) -> str:
    """
    Check credentials and return a signed bearer token for the user.
    """
    user = user_store.get_user_by_email(db, payload.email)
    if user is None or not user.verified:
        raise AuthError("Invalid credentials")

    if not verify_password(payload.password, user.password_hash):
        raise AuthError("Wrong password")

    logger.info("Login for user %s", user.id)
    return create_access_token(user.id, settings)
