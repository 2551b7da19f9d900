class MemoError(Exception):
    """Base class for memo storage failures."""


class MemoOperationError(MemoError):
    """A storage call failed; `operation` says which one."""

    operation = "operation"

    def __init__(self, message: str | None = None):
        super().__init__(message or f"memo {self.operation} failed")

    @property
    def code(self) -> str:
        return f"{self.operation}_failed"


class MemoFetchError(MemoOperationError):
    operation = "fetch"


class MemoCreateError(MemoOperationError):
    operation = "create"


class MemoUpdateError(MemoOperationError):
    operation = "update"


class MemoDeleteError(MemoOperationError):
    operation = "delete"


class MemoCountError(MemoOperationError):
    operation = "count"


class MemoSearchError(MemoOperationError):
    operation = "search"


class MemoNotFoundError(MemoUpdateError):
    """Update targeted an id the store doesn't have."""
