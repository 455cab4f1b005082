# File: diary_backend/services/user_store.py

"""
Credential store: persistence for User records.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from diary_backend.core.errors import ConflictError
from diary_backend.db.session import store_operation
from diary_backend.models.user import User


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    with store_operation(db, "looking up user"):
        return db.scalars(select(User).where(User.email == email)).first()


def create_user(
    db: Session,
    *,
    name: str,
    email: str,
    phone: str,
    password_hash: str,
    otp: str,
) -> User:
    user = User(
        name=name,
        email=email,
        phone=phone,
        password_hash=password_hash,
        otp=otp,
        verified=False,
    )
    with store_operation(db, "creating user"):
        db.add(user)
        try:
            db.commit()
        except IntegrityError as exc:
            # lost a race with a concurrent signup for the same email
            db.rollback()
            raise ConflictError("Email already registered") from exc
        db.refresh(user)
    return user


def mark_verified(db: Session, user: User) -> User:
    with store_operation(db, "verifying user"):
        user.verified = True
        user.otp = None
        db.commit()
    return user
