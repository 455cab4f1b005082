# File: diary_backend/core/security.py

"""
Security helpers for the diary API.

Password hashing uses bcrypt; bearer tokens are HS256 JWTs signed with the
secret held by ``Settings``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

from diary_backend.core.config import Settings
from diary_backend.core.errors import TokenError

# bcrypt only looks at the first 72 bytes
_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def create_access_token(
    subject: str,
    settings: Settings,
    *,
    issued_at: Optional[datetime] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Sign a token for ``subject`` (the user id).

    The token expires ``settings.access_token_expire_days`` after
    ``issued_at`` unless ``expires_delta`` is given.
    """
    now = issued_at or datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(days=settings.access_token_expire_days))
    to_encode: dict[str, Any] = {"sub": subject, "iat": now, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def verify_token(token: Optional[str], settings: Settings) -> str:
    """
    Validate a bearer token and return the user id it was issued for.

    Raises:
        TokenError: token missing, malformed, badly signed or expired.
    """
    if not token:
        raise TokenError("No token")

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.InvalidTokenError as exc:
        # covers expiry as well as bad signatures and garbage input
        raise TokenError("Invalid token") from exc

    user_id = payload.get("sub")
    if not user_id:
        raise TokenError("Invalid token")
    return str(user_id)
