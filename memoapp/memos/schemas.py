from datetime import datetime, timezone
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional


class MemoCategory(str, Enum):
    PERSONAL = "personal"
    WORK = "work"
    STUDY = "study"
    IDEA = "idea"
    OTHER = "other"


MEMO_CATEGORIES = {
    MemoCategory.PERSONAL.value: "개인",
    MemoCategory.WORK.value: "업무",
    MemoCategory.STUDY.value: "학습",
    MemoCategory.IDEA.value: "아이디어",
    MemoCategory.OTHER.value: "기타",
}


class MemoCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = ""
    category: MemoCategory = MemoCategory.PERSONAL
    tags: List[str] = Field(default_factory=list)


class SummarySave(BaseModel):
    summary: str


class MemoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    title: str
    content: str
    # plain str: records written by older clients may carry unknown categories
    category: str
    tags: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    summary_updated_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("summary_updated_at", "created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, v: datetime | None):
        # sqlite hands back naive datetimes
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class MemoList(BaseModel):
    items: List[MemoOut]
