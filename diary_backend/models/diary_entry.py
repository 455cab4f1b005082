# File: diary_backend/models/diary_entry.py

"""
DiaryEntry model.

Entries are owned through the plain ``user_id`` string stamped at creation.
There is no foreign key to ``users``, so orphans can exist.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from diary_backend.models.base import Base, new_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DiaryEntry(Base):
    __tablename__ = "diary_entries"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(32), index=True, nullable=False)

    subject: Mapped[str] = mapped_column(Text, nullable=False)
    # Free-form strings from the client's date/time pickers
    date: Mapped[str] = mapped_column(Text, nullable=False)
    time: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    theme: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
    )
