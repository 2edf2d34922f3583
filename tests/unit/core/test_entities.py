"""Tests for core entities."""

import pytest

from doccache.core.entities import (
    DOCUMENT_CACHE_TYPE,
    META_KEY,
    CacheConfig,
    CacheOperation,
    DiffResult,
    Watch,
    WriteQueryRequest,
    is_document_cache,
    is_using_document_cache,
    make_snapshot,
)
from doccache.core.services import DocumentCache, SimpleCache


class TestDiffResult:
    """Tests for DiffResult entity."""

    def test_hit(self) -> None:
        """Test creating a complete result."""
        diff = DiffResult.hit({"jobs": []})

        assert diff.result == {"jobs": []}
        assert diff.complete is True
        assert diff.missing == ()

    def test_miss(self) -> None:
        """Test creating an incomplete result with a diagnostic."""
        diff = DiffResult.miss("{ jobs { id } }", {"id": "1"})

        assert diff.result == {}
        assert diff.complete is False
        assert len(diff.missing) == 1
        assert diff.missing[0].query == "{ jobs { id } }"
        assert diff.missing[0].variables == {"id": "1"}
        assert diff.missing[0].path == ()


class TestCacheConfig:
    """Tests for CacheConfig entity."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = CacheConfig()

        assert config.add_typename is True
        assert config.query_memo_size == 1000
        assert config.log_operations is False

    def test_invalid_memo_size(self) -> None:
        """Test that a memo size below one is rejected."""
        with pytest.raises(ValueError):
            CacheConfig(query_memo_size=0)


class TestCacheOperation:
    """Tests for operation kinds and requests."""

    def test_write_query_value(self) -> None:
        """Test the wire name of the writeQuery operation."""
        assert CacheOperation("writeQuery") is CacheOperation.WRITE_QUERY

    def test_write_query_request_is_frozen(self) -> None:
        """Test that write requests cannot be altered by subscribers."""
        request = WriteQueryRequest(query="{ a }", variables=None, data={"a": 1})

        with pytest.raises(AttributeError):
            request.data = {}  # type: ignore[misc]

    def test_watches_compare_by_identity(self) -> None:
        """Test that equal-looking watches are distinct registrations."""
        callback = lambda diff: None  # noqa: E731
        first = Watch(query="{ a }", variables=None, callback=callback)
        second = Watch(query="{ a }", variables=None, callback=callback)

        assert first != second
        assert len({first, second}) == 2


class TestSnapshotHelpers:
    """Tests for snapshot layout helpers."""

    def test_make_snapshot(self) -> None:
        """Test the empty snapshot shape."""
        assert make_snapshot() == {
            META_KEY: {"type": DOCUMENT_CACHE_TYPE, "extraRootIds": []}
        }

    def test_make_snapshot_returns_fresh_value(self) -> None:
        """Test that snapshots do not share their metadata record."""
        first = make_snapshot()
        first[META_KEY]["extraRootIds"].append("ROOT_QUERY")

        assert make_snapshot()[META_KEY]["extraRootIds"] == []

    @pytest.mark.parametrize(
        "snapshot",
        [
            None,
            [],
            {},
            {META_KEY: "DocumentCache"},
            {META_KEY: {"extraRootIds": []}},
            {META_KEY: {"type": "InMemoryCache"}},
        ],
    )
    def test_is_document_cache_rejects(self, snapshot: object) -> None:
        """Test values that are not DocumentCache snapshots."""
        assert is_document_cache(snapshot) is False

    def test_is_document_cache_accepts(self) -> None:
        """Test that tagged snapshots are recognized."""
        assert is_document_cache(make_snapshot()) is True

    def test_is_using_document_cache(self) -> None:
        """Test detecting the cache variant behind a handle."""
        assert is_using_document_cache(DocumentCache()) is True
        assert is_using_document_cache(SimpleCache()) is False
