"""Query cache keyed by endpoint tuples, with explicit invalidation."""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Hashable, Iterable

from roster.client.results import QueryResult
from roster.exceptions import RosterError

logger = logging.getLogger(__name__)

QueryKey = tuple[Hashable, ...]


def normalize_key(key: "QueryKey | str | Iterable[Hashable]") -> QueryKey:
    """Accept a bare path string or any iterable and return a tuple key."""
    if isinstance(key, str):
        return (key,)
    return tuple(key)


@dataclass
class _Entry:
    status: str = "pending"
    data: Any = None
    error: str | None = None
    is_stale: bool = False
    updated_at: datetime | None = None
    fetching: int = 0
    generation: int = 0

    def snapshot(self) -> QueryResult:
        return QueryResult(
            status=self.status,
            data=self.data,
            error=self.error,
            is_stale=self.is_stale,
            is_fetching=self.fetching > 0,
            updated_at=self.updated_at,
        )


class QueryCache:
    """Last-known server state per query key.

    Entries never expire with age; they only become stale through
    invalidate(). A stale, failed or missing entry is refetched on the next
    fetch(). Entries can only change through fetch() and invalidate().
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._entries: dict[QueryKey, _Entry] = {}
        self._lock = threading.RLock()
        self._clock = clock

    def fetch(self, key, fetcher: Callable[[], Any]) -> QueryResult:
        """
        Return the cached value for key, calling fetcher if it needs refreshing.

        Args:
            key: Query key (tuple, or a path string)
            fetcher: Zero-argument callable hitting the server

        Returns:
            QueryResult snapshot. Fetch failures are reported as
            status="error"; they are never raised.
        """
        key = normalize_key(key)
        with self._lock:
            entry = self._entries.setdefault(key, _Entry())
            if entry.status == "success" and not entry.is_stale:
                return entry.snapshot()
            entry.fetching += 1
            generation = entry.generation

        try:
            data = fetcher()
        except RosterError as e:
            logger.warning(f"Query {key!r} failed: {e}")
            with self._lock:
                entry.fetching -= 1
                entry.status = "error"
                entry.error = str(e)
                return entry.snapshot()

        with self._lock:
            entry.fetching -= 1
            entry.status = "success"
            entry.data = data
            entry.error = None
            entry.updated_at = self._clock()
            # Invalidated while in flight: the result may predate the mutation
            entry.is_stale = entry.generation != generation
            logger.debug(f"Query {key!r} refreshed")
            return entry.snapshot()

    def peek(self, key) -> QueryResult:
        """Current state of key without fetching; unknown keys are pending."""
        key = normalize_key(key)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return QueryResult(status="pending")
            return entry.snapshot()

    def invalidate(self, prefix) -> int:
        """
        Mark every entry whose key starts with prefix as stale.

        Args:
            prefix: Key prefix (tuple, or a path string)

        Returns:
            Number of entries invalidated
        """
        prefix = normalize_key(prefix)
        count = 0
        with self._lock:
            for key, entry in self._entries.items():
                if key[: len(prefix)] == prefix:
                    entry.is_stale = True
                    entry.generation += 1
                    count += 1
        logger.debug(f"Invalidated {count} queries for {prefix!r}")
        return count

    def keys(self) -> list[QueryKey]:
        with self._lock:
            return list(self._entries)
