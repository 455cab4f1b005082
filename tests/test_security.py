# File: tests/test_security.py

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from diary_backend.core.errors import TokenError
from diary_backend.core.security import (
    create_access_token,
    hash_password,
    verify_password,
    verify_token,
)


def test_password_hash_roundtrip():
    hashed = hash_password("abc", rounds=4)
    assert hashed != "abc"
    assert verify_password("abc", hashed)
    assert not verify_password("abd", hashed)


def test_verify_password_against_garbage_hash():
    assert verify_password("abc", "not-a-bcrypt-hash") is False


def test_token_carries_identity(settings):
    token = create_access_token("user-123", settings)
    assert verify_token(token, settings) == "user-123"


def test_token_expires_after_seven_days(settings):
    token = create_access_token("user-123", settings)
    claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60


def test_token_still_valid_inside_window(settings):
    issued = datetime.now(timezone.utc) - timedelta(days=6, hours=23)
    token = create_access_token("user-123", settings, issued_at=issued)
    assert verify_token(token, settings) == "user-123"


def test_token_rejected_after_window(settings):
    issued = datetime.now(timezone.utc) - timedelta(days=7, seconds=1)
    token = create_access_token("user-123", settings, issued_at=issued)
    with pytest.raises(TokenError):
        verify_token(token, settings)


def test_token_signed_with_other_secret_rejected(settings):
    other = settings.model_copy(update={"secret_key": "another-secret-key-of-decent-length"})
    token = create_access_token("user-123", other)
    with pytest.raises(TokenError):
        verify_token(token, settings)


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token(settings, token):
    with pytest.raises(TokenError, match="No token"):
        verify_token(token, settings)


def test_malformed_token(settings):
    with pytest.raises(TokenError, match="Invalid token"):
        verify_token("not.a.jwt", settings)


def test_token_without_subject_rejected(settings):
    token = jwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(days=1)},
        settings.secret_key,
        algorithm=settings.algorithm,
    )
    with pytest.raises(TokenError):
        verify_token(token, settings)
