import logging
from contextlib import contextmanager
from datetime import timedelta
from typing import Iterator, Type

from sqlalchemy import delete, desc, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.memos.errors import (
    MemoCountError,
    MemoCreateError,
    MemoDeleteError,
    MemoFetchError,
    MemoNotFoundError,
    MemoOperationError,
    MemoSearchError,
    MemoUpdateError,
)
from app.memos.models import MemoRow, utcnow
from app.memos.samples import SAMPLE_MEMOS
from app.memos.schemas import ALL_CATEGORIES, Memo, MemoFormData

log = logging.getLogger(__name__)


def to_memo(row: MemoRow) -> Memo:
    return Memo.model_validate(row)


@contextmanager
def _storage(db: Session, error: Type[MemoOperationError], what: str) -> Iterator[None]:
    """Turn any SQLAlchemy failure into `error`, after logging the cause and rolling back."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        log.error("error %s: %s", what, e)
        raise error() from e


def _newest_first():
    return select(MemoRow).order_by(desc(MemoRow.created_at))


def _contains(query: str) -> str:
    # LIKE wildcards in the user's text are matched literally
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def list_memos(db: Session) -> list[Memo]:
    with _storage(db, MemoFetchError, "fetching memos"):
        rows = db.scalars(_newest_first()).all()
    return [to_memo(r) for r in rows]


def get_memo(db: Session, memo_id: str) -> Memo | None:
    with _storage(db, MemoFetchError, f"fetching memo {memo_id}"):
        row = db.get(MemoRow, memo_id)
    return to_memo(row) if row else None


def create_memo(db: Session, form: MemoFormData) -> Memo:
    now = utcnow()
    row = MemoRow(
        title=form.title,
        content=form.content,
        category=form.category,
        created_at=now,
        updated_at=now,
    )
    row.tags = form.tags
    with _storage(db, MemoCreateError, "creating memo"):
        db.add(row)
        db.commit()
        db.refresh(row)
    log.info("created memo %s", row.id)
    return to_memo(row)


def update_memo(db: Session, memo_id: str, form: MemoFormData) -> Memo:
    """Replace all four mutable fields. Unknown ids fail loudly."""
    with _storage(db, MemoUpdateError, f"updating memo {memo_id}"):
        row = db.get(MemoRow, memo_id)
        if row is None:
            log.error("error updating memo %s: not found", memo_id)
            raise MemoNotFoundError(f"memo not found: {memo_id}")
        row.title = form.title
        row.content = form.content
        row.category = form.category
        row.tags = form.tags
        row.updated_at = utcnow()
        db.commit()
        db.refresh(row)
    return to_memo(row)


def delete_memo(db: Session, memo_id: str) -> None:
    # no existence check: deleting a missing id is fine
    with _storage(db, MemoDeleteError, f"deleting memo {memo_id}"):
        db.execute(delete(MemoRow).where(MemoRow.id == memo_id))
        db.commit()


def clear_memos(db: Session) -> None:
    # catch-all predicate rather than a truncate
    with _storage(db, MemoDeleteError, "clearing memos"):
        db.execute(delete(MemoRow).where(MemoRow.id != ""))
        db.commit()
    log.info("cleared all memos")


def count_memos(db: Session) -> int:
    with _storage(db, MemoCountError, "counting memos"):
        n = db.scalar(select(func.count()).select_from(MemoRow))
    return n or 0


def list_memos_by_category(db: Session, category: str) -> list[Memo]:
    stmt = _newest_first()
    if category != ALL_CATEGORIES:
        stmt = stmt.where(MemoRow.category == category)
    with _storage(db, MemoFetchError, f"fetching memos by category {category!r}"):
        rows = db.scalars(stmt).all()
    return [to_memo(r) for r in rows]


def search_memos(db: Session, query: str) -> list[Memo]:
    """Case-insensitive substring match on title or content. Tags are not searched."""
    pattern = _contains(query)
    stmt = _newest_first().where(
        or_(
            MemoRow.title.ilike(pattern, escape="\\"),
            MemoRow.content.ilike(pattern, escape="\\"),
        )
    )
    with _storage(db, MemoSearchError, f"searching memos for {query!r}"):
        rows = db.scalars(stmt).all()
    return [to_memo(r) for r in rows]


def seed_sample_data(db: Session) -> bool:
    """Insert SAMPLE_MEMOS into an empty store.

    Returns False when data already exists (nothing written) or when the bulk
    insert fails; True once the samples are in.
    """
    if count_memos(db) > 0:
        return False

    now = utcnow()
    rows = []
    # step back 1ms per sample so newest-first lists them in SAMPLE_MEMOS order
    for i, sample in enumerate(SAMPLE_MEMOS):
        stamp = now - timedelta(milliseconds=i)
        row = MemoRow(
            title=sample["title"],
            content=sample["content"],
            category=sample["category"],
            created_at=stamp,
            updated_at=stamp,
        )
        row.tags = sample["tags"]
        rows.append(row)
    try:
        db.add_all(rows)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        log.error("error seeding sample data: %s", e)
        return False
    log.info("seeded %d sample memos", len(rows))
    return True
