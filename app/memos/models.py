from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.shared.db import Base
import uuid, json

def _id32() -> str:
    return uuid.uuid4().hex  # 32 chars

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class MemoRow(Base):
    __tablename__ = "memos"
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_id32)
    title: Mapped[str] = mapped_column(String(200))
    content: Mapped[str] = mapped_column(Text, default="")
    category: Mapped[str] = mapped_column(String(32), default="personal", index=True)
    # SQLite has no array type; column is "tags", the list lives behind the property
    tags_json: Mapped[str] = mapped_column("tags", Text, default="[]")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    @property
    def tags(self) -> list[str]:
        try:
            return json.loads(self.tags_json or "[]")
        except Exception:
            return []

    @tags.setter
    def tags(self, val: list[str]):
        self.tags_json = json.dumps(list(val or []), ensure_ascii=False)
