# File: diary_backend/services/diary_store.py

"""
Diary store: per-owner persistence of diary entries.
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from diary_backend.db.session import store_operation
from diary_backend.models.diary_entry import DiaryEntry
from diary_backend.schemas.diary import DiaryCreate

logger = logging.getLogger(__name__)


def create_entry(db: Session, owner_id: str, payload: DiaryCreate) -> DiaryEntry:
    entry = DiaryEntry(user_id=owner_id, **payload.model_dump())
    with store_operation(db, "creating diary entry"):
        db.add(entry)
        db.commit()
        db.refresh(entry)
    return entry


def list_entries(db: Session, owner_id: str) -> list[DiaryEntry]:
    stmt = (
        select(DiaryEntry)
        .where(DiaryEntry.user_id == owner_id)
        .order_by(DiaryEntry.created_at)
    )
    with store_operation(db, "listing diary entries"):
        return list(db.scalars(stmt))


def delete_entry(db: Session, entry_id: str) -> None:
    """
    Remove an entry by id. Missing ids are not an error.

    The owner is not checked: any authenticated caller can delete any entry.
    """
    with store_operation(db, "deleting diary entry"):
        result = db.execute(delete(DiaryEntry).where(DiaryEntry.id == entry_id))
        db.commit()
    if not result.rowcount:
        logger.info("Delete of unknown diary entry %s ignored", entry_id)
