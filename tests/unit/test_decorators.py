"""Tests for the cache_first decorator."""

from unittest.mock import Mock

from graphql import parse

import doccache.provider
from doccache import DocumentCache, cache_first, configure

JOBS = parse("query Jobs($id: ID) { jobs(id: $id) { id } }")


class TestCacheFirst:
    """Tests for @cache_first."""

    def test_fetches_on_miss_and_caches(self) -> None:
        """Test that a miss calls the fetcher and stores the result."""
        cache = DocumentCache()
        fetch = Mock(return_value={"jobs": [{"id": "1"}]})
        wrapped = cache_first(JOBS, cache=cache)(fetch)

        result = wrapped({"id": "1"})

        assert result == {"jobs": [{"id": "1"}]}
        fetch.assert_called_once_with({"id": "1"})
        assert cache.read(JOBS, {"id": "1"}) == result

    def test_serves_hit_from_cache(self) -> None:
        """Test that a hit never reaches the fetcher."""
        cache = DocumentCache()
        cache.write(JOBS, {"id": "1"}, {"jobs": []})
        fetch = Mock()
        wrapped = cache_first(JOBS, cache=cache)(fetch)

        assert wrapped({"id": "1"}) == {"jobs": []}
        fetch.assert_not_called()

    def test_notifies_watchers(self) -> None:
        """Test that fetched results reach watchers."""
        cache = DocumentCache()
        callback = Mock()
        cache.watch(JOBS, None, callback)

        cache_first(JOBS, cache=cache)(lambda variables: {"jobs": []})()

        callback.assert_called_once()

    def test_uses_process_wide_cache(self) -> None:
        """Test falling back to the configured cache."""
        cache = DocumentCache()
        configure(cache)

        @cache_first(JOBS)
        def fetch_jobs(variables=None):
            return {"jobs": []}

        fetch_jobs()

        assert cache.read(JOBS) == {"jobs": []}
        assert fetch_jobs.__name__ == "fetch_jobs"

    def test_without_cache_calls_through(self) -> None:
        """Test that an unconfigured decorator just calls the fetcher."""
        doccache.provider._cache = None
        fetch = Mock(return_value={"jobs": []})

        assert cache_first(JOBS)(fetch)() == {"jobs": []}
        assert cache_first(JOBS)(fetch)() == {"jobs": []}
        assert fetch.call_count == 2
