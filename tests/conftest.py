# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from diary_backend.core.config import Settings
from diary_backend.main import create_application

TEST_SECRET = "test-secret-key-with-enough-length-for-hs256"


class RecordingOtpChannel:
    """Keeps every OTP it is asked to send, keyed by email."""

    def __init__(self):
        self.sent: dict[str, str] = {}

    def send(self, email: str, otp: str) -> None:
        self.sent[email] = otp


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        secret_key=TEST_SECRET,
        bcrypt_rounds=4,
        log_level="DEBUG",
    )


@pytest.fixture
def otp_channel():
    return RecordingOtpChannel()


@pytest.fixture
def app(settings, otp_channel):
    return create_application(settings, otp_channel=otp_channel)


@pytest.fixture
def client(app):
    # context manager runs the lifespan, which creates the tables
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client):
    session = client.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def signup_payload(email="ann@x.com", password="abc", name="Ann", phone="555"):
    return {"name": name, "email": email, "phone": phone, "password": password}


@pytest.fixture
def register(client, otp_channel):
    """Sign up, verify and log in a user; returns their token."""

    def _register(email="ann@x.com", password="abc"):
        resp = client.post("/signup", json=signup_payload(email=email, password=password))
        assert resp.status_code == 200
        resp = client.post("/verify", json={"email": email, "otp": otp_channel.sent[email]})
        assert resp.status_code == 200
        resp = client.post("/login", json={"email": email, "password": password})
        assert resp.status_code == 200
        return resp.json()["token"]

    return _register
