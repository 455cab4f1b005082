# File: diary_backend/api/v1/routes_diary.py

"""
Diary routes. Every route sits behind the token guard.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from diary_backend.api.deps import get_current_user_id, get_db
from diary_backend.schemas.diary import DiaryCreate, DiaryRead
from diary_backend.schemas.user import MessageResponse
from diary_backend.services import diary_store

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user_id)])


@router.post("", response_model=DiaryRead, summary="Create diary entry")
def create_diary(
    payload: DiaryCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return diary_store.create_entry(db, user_id, payload)


@router.get("", response_model=list[DiaryRead], summary="List my diary entries")
def list_diaries(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return diary_store.list_entries(db, user_id)


@router.delete("/{entry_id}", response_model=MessageResponse, summary="Delete diary entry")
def delete_diary(
    entry_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Delete an entry by id. Succeeds even when the id is unknown.
    """
    # TODO: reject deletes of entries owned by another user
    logger.info("User %s deleting diary entry %s", user_id, entry_id)
    diary_store.delete_entry(db, entry_id)
    return MessageResponse(msg="Deleted")
