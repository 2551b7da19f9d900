"""Session-local view over the memo store.

The controller keeps the last-known list of memos for one UI session, answers
filter/search/stats questions from memory, and patches that list after each
successful mutation instead of re-fetching. The store stays authoritative: writes
made by other sessions are only picked up by `refresh()`.

Calls are not sequenced against each other. Two mutations on the same memo that
finish in either order leave the cache in whichever state arrived last.
"""
import logging
from collections import Counter
from enum import Enum
from typing import Callable

from sqlalchemy.orm import Session

from app.memos import service
from app.memos.errors import MemoError
from app.memos.schemas import ALL_CATEGORIES, Memo, MemoFormData, MemoStats
from app.shared.db import SessionLocal

log = logging.getLogger(__name__)


class ErrorPolicy(Enum):
    PROPAGATE = "propagate"  # user-triggered: caller shows the error
    SUPPRESS = "suppress"    # implicit load: log it, keep showing what we have


OPERATION_POLICIES: dict[str, ErrorPolicy] = {
    "initialize": ErrorPolicy.SUPPRESS,
    "refresh": ErrorPolicy.SUPPRESS,
    "create": ErrorPolicy.PROPAGATE,
    "update": ErrorPolicy.PROPAGATE,
    "delete": ErrorPolicy.PROPAGATE,
    "clear_all": ErrorPolicy.PROPAGATE,
}


def _matches(memo: Memo, needle: str) -> bool:
    return (
        needle in memo.title.lower()
        or needle in memo.content.lower()
        or any(needle in tag.lower() for tag in memo.tags)
    )


class MemoViewController:
    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self._session_factory = session_factory
        self._memos: list[Memo] = []
        self._version = 0
        self._view_key: tuple | None = None
        self._view: list[Memo] = []
        self._initialized = False
        self.search_query = ""
        self.selected_category = ALL_CATEGORIES
        self.loading = True

    # --- state ---------------------------------------------------------

    @property
    def all_memos(self) -> list[Memo]:
        return list(self._memos)

    @property
    def memos(self) -> list[Memo]:
        return self.derived_view()

    def _replace(self, memos: list[Memo]) -> None:
        self._memos = list(memos)
        self._version += 1

    def _call(self, operation: str, fn: Callable, *args):
        """Run one gateway call in its own session; returns (succeeded, result)."""
        try:
            with self._session_factory() as db:
                return True, fn(db, *args)
        except MemoError as e:
            if OPERATION_POLICIES[operation] is ErrorPolicy.PROPAGATE:
                raise
            log.error("memo %s failed: %s", operation, e)
            return False, None

    # --- loading -------------------------------------------------------

    def initialize(self) -> None:
        """Seed (when empty) then load. Runs once; later calls do nothing."""
        if self._initialized:
            return
        self._initialized = True
        self.loading = True

        def _seed_then_list(db: Session) -> list[Memo]:
            # seed must land before the first read
            service.seed_sample_data(db)
            return service.list_memos(db)

        try:
            succeeded, memos = self._call("initialize", _seed_then_list)
            self._replace(memos if succeeded else [])
        finally:
            self.loading = False

    def refresh(self) -> None:
        self.loading = True
        try:
            succeeded, memos = self._call("refresh", service.list_memos)
            if succeeded:
                self._replace(memos)
        finally:
            self.loading = False

    # --- mutations -----------------------------------------------------

    def create(self, form: MemoFormData) -> Memo:
        _, memo = self._call("create", service.create_memo, form)
        # newest created_at, so prepending keeps newest-first order
        self._replace([memo, *self._memos])
        return memo

    def update(self, memo_id: str, form: MemoFormData) -> Memo:
        _, memo = self._call("update", service.update_memo, memo_id, form)
        # same position: ordering is by created_at, which doesn't change
        self._replace([memo if m.id == memo_id else m for m in self._memos])
        return memo

    def delete(self, memo_id: str) -> None:
        self._call("delete", service.delete_memo, memo_id)
        self._replace([m for m in self._memos if m.id != memo_id])

    def clear_all(self) -> None:
        self._call("clear_all", service.clear_memos)
        self._replace([])
        self.search_query = ""
        self.selected_category = ALL_CATEGORIES

    # --- filters & derived views --------------------------------------

    def set_search_query(self, query: str) -> None:
        self.search_query = query

    def set_category(self, category: str) -> None:
        self.selected_category = category

    def find(self, memo_id: str) -> Memo | None:
        return next((m for m in self._memos if m.id == memo_id), None)

    def derived_view(self) -> list[Memo]:
        """Category filter first, then search over title, content and tags."""
        key = (self._version, self.selected_category, self.search_query)
        if key == self._view_key:
            return list(self._view)

        filtered = self._memos
        if self.selected_category != ALL_CATEGORIES:
            filtered = [m for m in filtered if m.category == self.selected_category]
        if self.search_query.strip():
            needle = self.search_query.lower()
            filtered = [m for m in filtered if _matches(m, needle)]

        self._view_key, self._view = key, list(filtered)
        return list(filtered)

    def stats(self) -> MemoStats:
        return MemoStats(
            total=len(self._memos),
            by_category=dict(Counter(m.category for m in self._memos)),
            filtered=len(self.derived_view()),
        )
