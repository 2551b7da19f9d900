from datetime import datetime, timezone
from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

CATEGORIES = ("personal", "work", "study", "idea", "other")
ALL_CATEGORIES = "all"

class MemoFormData(BaseModel):
    """The mutable part of a memo, used for both create and update."""
    title: str = Field(min_length=1, max_length=200)
    content: str = ""
    category: str = "personal"
    tags: List[str] = Field(default_factory=list)

class MemoIn(MemoFormData):
    # category is only checked at the HTTP edge; the gateway stores any string
    @field_validator("category")
    @classmethod
    def _known_category(cls, v: str) -> str:
        if v not in CATEGORIES:
            raise ValueError(f"category must be one of {', '.join(CATEGORIES)}")
        return v

class Memo(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    title: str
    content: str
    category: str
    tags: List[str]
    created_at: datetime
    updated_at: datetime

    # sqlite hands timestamps back naive; they were written as UTC
    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, v: datetime) -> datetime:
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v

class MemoList(BaseModel):
    items: List[Memo]
    count: int

class MemoCount(BaseModel):
    count: int

class SeedResult(BaseModel):
    seeded: bool

class MemoStats(BaseModel):
    total: int
    by_category: Dict[str, int]
    filtered: int
