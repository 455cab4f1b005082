# File: diary_backend/api/v1/routes_auth.py

"""
Auth API routes: signup, OTP verification and login.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from diary_backend.api.deps import get_db, get_otp_channel, get_settings
from diary_backend.core.config import Settings
from diary_backend.schemas.user import (
    LoginRequest,
    MessageResponse,
    SignupRequest,
    TokenResponse,
    VerifyRequest,
)
from diary_backend.services import auth_service
from diary_backend.services.otp_service import OtpChannel

router = APIRouter()


@router.post("/signup", response_model=MessageResponse, summary="Register a new user")
def signup(
    payload: SignupRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    channel: OtpChannel = Depends(get_otp_channel),
):
    """
    Create an unverified account and issue an OTP.

    The OTP goes to the configured channel (the server log by default),
    never into the response.
    """
    auth_service.signup(db, payload, settings=settings, channel=channel)
    return MessageResponse(msg="OTP generated (check console for now)")


@router.post("/verify", response_model=MessageResponse, summary="Confirm signup OTP")
def verify(payload: VerifyRequest, db: Session = Depends(get_db)):
    auth_service.verify(db, payload)
    return MessageResponse(msg="Verified")


@router.post("/login", response_model=TokenResponse, summary="Exchange credentials for a token")
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token = auth_service.login(db, payload, settings=settings)
    return TokenResponse(token=token)
