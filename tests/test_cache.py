"""Tests for the query cache."""

from datetime import datetime
from unittest.mock import Mock

import pytest

from roster.client.cache import QueryCache, normalize_key
from roster.exceptions import ApiError, NetworkError

MONTH_KEY = ("/api/special-days/month",)
LIST_KEY = ("/api/special-days",)


def test_normalize_key():
    assert normalize_key("/api/users") == ("/api/users",)
    assert normalize_key(["/api/special-days/month", 2025, 3]) == (
        "/api/special-days/month",
        2025,
        3,
    )


def test_unknown_key_is_pending():
    result = QueryCache().peek(LIST_KEY)
    assert result.is_pending
    assert result.data is None


def test_fetch_is_served_from_cache_until_invalidated():
    cache = QueryCache()
    fetcher = Mock(return_value=["a"])

    first = cache.fetch(LIST_KEY, fetcher)
    second = cache.fetch(LIST_KEY, fetcher)
    assert first.is_success and second.data == ["a"]
    assert fetcher.call_count == 1

    cache.invalidate(LIST_KEY)
    assert cache.peek(LIST_KEY).is_stale
    cache.fetch(LIST_KEY, fetcher)
    assert fetcher.call_count == 2
    assert not cache.peek(LIST_KEY).is_stale


def test_fetch_records_update_time():
    stamp = datetime(2025, 3, 1, 9, 30)
    cache = QueryCache(clock=lambda: stamp)
    assert cache.fetch(LIST_KEY, lambda: []).updated_at == stamp


def test_invalidate_by_prefix_hits_every_month():
    cache = QueryCache()
    cache.fetch(LIST_KEY, lambda: [])
    cache.fetch(MONTH_KEY + (2025, 3), lambda: [])
    cache.fetch(MONTH_KEY + (2025, 4), lambda: [])

    assert cache.invalidate(MONTH_KEY) == 2
    assert cache.peek(MONTH_KEY + (2025, 3)).is_stale
    assert cache.peek(MONTH_KEY + (2025, 4)).is_stale
    # Tuple prefixes compare element-wise, not as string prefixes
    assert not cache.peek(LIST_KEY).is_stale


def test_invalidate_unknown_prefix_is_a_no_op():
    cache = QueryCache()
    cache.fetch(LIST_KEY, lambda: [])
    assert cache.invalidate(("/api/admin/settings",)) == 0
    assert set(cache.keys()) == {LIST_KEY}


@pytest.mark.parametrize("error", [ApiError(500, "Database unavailable"), NetworkError("down")])
def test_fetch_failure_is_reported_not_raised(error):
    cache = QueryCache()
    result = cache.fetch(LIST_KEY, Mock(side_effect=error))
    assert result.is_error
    assert result.error == str(error)
    assert result.data is None


def test_failed_refetch_keeps_last_good_data():
    cache = QueryCache()
    cache.fetch(LIST_KEY, lambda: ["old"])
    cache.invalidate(LIST_KEY)

    result = cache.fetch(LIST_KEY, Mock(side_effect=ApiError(503)))
    assert result.is_error
    assert result.data == ["old"]


def test_error_entry_is_refetched():
    cache = QueryCache()
    cache.fetch(LIST_KEY, Mock(side_effect=ApiError(503)))
    result = cache.fetch(LIST_KEY, lambda: ["fresh"])
    assert result.is_success
    assert result.error is None
    assert result.data == ["fresh"]


def test_invalidation_during_fetch_leaves_result_stale():
    cache = QueryCache()
    calls = []

    def fetcher():
        calls.append(1)
        if len(calls) == 1:
            # A mutation lands while this read is in flight
            assert cache.peek(LIST_KEY).is_fetching
            cache.invalidate(LIST_KEY)
        return len(calls)

    first = cache.fetch(LIST_KEY, fetcher)
    assert first.data == 1
    assert first.is_stale

    second = cache.fetch(LIST_KEY, fetcher)
    assert second.data == 2
    assert not second.is_stale
