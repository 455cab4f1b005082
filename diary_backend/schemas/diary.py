# File: diary_backend/schemas/diary.py

from pydantic import BaseModel, ConfigDict


class DiaryBase(BaseModel):
    subject: str
    date: str
    time: str
    content: str
    theme: str  # "pink" or "white" in the UI; not enforced here


class DiaryCreate(DiaryBase):
    pass


class DiaryRead(DiaryBase):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
