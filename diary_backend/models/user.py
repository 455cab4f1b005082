# File: diary_backend/models/user.py

"""
User model.

A user is created unverified at signup and flipped to verified once the
OTP sent at signup is confirmed. Nothing else mutates it.
"""

from typing import Optional

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from diary_backend.models.base import Base, new_id


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    # Compared exactly as stored, no case folding
    email: Mapped[str] = mapped_column(Text, unique=True, index=True, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    otp: Mapped[Optional[str]] = mapped_column(String(6), nullable=True)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
