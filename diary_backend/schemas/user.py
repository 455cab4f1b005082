# File: diary_backend/schemas/user.py

from typing import Optional

from pydantic import BaseModel


# Emails are plain strings: they are stored and compared exactly as typed.
class SignupRequest(BaseModel):
    name: str
    email: str
    phone: str
    password: str


class VerifyRequest(BaseModel):
    email: str
    # A missing code is answered like a wrong one
    otp: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    msg: str
