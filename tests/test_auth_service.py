# File: tests/test_auth_service.py

import pytest

from diary_backend.core.errors import AuthError, ConflictError, ValidationError
from diary_backend.schemas.user import LoginRequest, SignupRequest, VerifyRequest
from diary_backend.services import auth_service, user_store


def _signup(db, settings, channel, email="ann@x.com", password="abc"):
    payload = SignupRequest(name="Ann", email=email, phone="555", password=password)
    auth_service.signup(db, payload, settings=settings, channel=channel)


@pytest.mark.parametrize("password", ["", "a", "ab"])
def test_short_passwords_raise_validation_error(db, settings, otp_channel, password):
    with pytest.raises(ValidationError):
        _signup(db, settings, otp_channel, password=password)
    assert user_store.get_user_by_email(db, "ann@x.com") is None
    assert otp_channel.sent == {}


def test_second_signup_conflicts(db, settings, otp_channel):
    _signup(db, settings, otp_channel)
    with pytest.raises(ConflictError):
        _signup(db, settings, otp_channel)


def test_store_level_duplicate_is_conflict(db):
    user_store.create_user(
        db, name="Ann", email="ann@x.com", phone="555", password_hash="h", otp="123456"
    )
    with pytest.raises(ConflictError):
        user_store.create_user(
            db, name="Ann", email="ann@x.com", phone="555", password_hash="h", otp="654321"
        )


def test_verify_after_success_cannot_be_replayed(db, settings, otp_channel):
    _signup(db, settings, otp_channel)
    otp = otp_channel.sent["ann@x.com"]

    auth_service.verify(db, VerifyRequest(email="ann@x.com", otp=otp))
    with pytest.raises(AuthError):
        auth_service.verify(db, VerifyRequest(email="ann@x.com", otp=otp))


def test_otp_compare_is_exact(db, settings, otp_channel):
    _signup(db, settings, otp_channel)
    otp = otp_channel.sent["ann@x.com"]

    with pytest.raises(AuthError):
        auth_service.verify(db, VerifyRequest(email="ann@x.com", otp=f" {otp}"))
    assert user_store.get_user_by_email(db, "ann@x.com").verified is False


def test_unverified_login_fails_even_with_right_password(db, settings, otp_channel):
    _signup(db, settings, otp_channel)
    with pytest.raises(AuthError):
        auth_service.login(db, LoginRequest(email="ann@x.com", password="abc"), settings=settings)


def test_login_unknown_user(db, settings):
    with pytest.raises(AuthError):
        auth_service.login(db, LoginRequest(email="ghost@x.com", password="abc"), settings=settings)
