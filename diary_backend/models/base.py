# File: diary_backend/models/base.py

import uuid

from sqlalchemy.orm import DeclarativeBase


def new_id() -> str:
    return uuid.uuid4().hex


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.
    """
    pass
