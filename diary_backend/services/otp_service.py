# File: diary_backend/services/otp_service.py

"""
One-time passwords and the channels they are delivered through.
"""

import logging
import secrets
from typing import Protocol

logger = logging.getLogger(__name__)

OTP_MIN = 100000
OTP_MAX = 999999


def generate_otp() -> str:
    """Uniformly random 6-digit code in [100000, 999999]."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


class OtpChannel(Protocol):
    def send(self, email: str, otp: str) -> None:
        ...


class LogOtpChannel:
    """
    Writes the code to the application log instead of delivering it.
    """

    def send(self, email: str, otp: str) -> None:
        logger.info("Signup OTP for %s: %s", email, otp)
