"""Result types returned by queries and mutations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")

QueryStatus = Literal["pending", "success", "error"]


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Snapshot of a cached query.

    ``data`` keeps the last successfully fetched value even when a later
    refetch failed.
    """

    status: QueryStatus
    data: T | None = None
    error: str | None = None
    is_stale: bool = False
    is_fetching: bool = False
    updated_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"

    @property
    def is_success(self) -> bool:
        return self.status == "success"

    @property
    def is_error(self) -> bool:
        return self.status == "error"


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a mutation; failures are reported here, never raised."""

    ok: bool
    data: Any = None
    error: str | None = None

    @classmethod
    def success(cls, data: Any = None) -> "MutationResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "MutationResult":
        return cls(ok=False, error=error)
