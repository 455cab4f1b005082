# File: diary_backend/api/deps.py

from collections.abc import Generator
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from diary_backend.core.config import Settings
from diary_backend.core.security import verify_token
from diary_backend.services.otp_service import OtpChannel


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_otp_channel(request: Request) -> OtpChannel:
    return request.app.state.otp_channel


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Access guard for diary routes.

    The Authorization header carries the raw token; a "Bearer " prefix is
    accepted too. The resolved user id is also left on ``request.state``.
    """
    token = authorization
    if token and token.lower().startswith("bearer "):
        token = token[len("bearer "):].strip()

    user_id = verify_token(token, settings)
    request.state.user_id = user_id
    return user_id
