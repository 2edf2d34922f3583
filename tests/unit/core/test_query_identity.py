"""Tests for QueryIdentityIndex."""

from unittest.mock import Mock

import pytest
from graphql import parse

from doccache.core.services.query_identity import QueryIdentityIndex
from doccache.infrastructure.key_builders.default import DefaultKeyBuilder
from doccache.infrastructure.normalizers.typename import TypenameNormalizer


@pytest.fixture
def normalizer() -> Mock:
    """A normalizer spy wrapping the real one."""
    return Mock(wraps=TypenameNormalizer())


@pytest.fixture
def index(normalizer: Mock) -> QueryIdentityIndex:
    """Create an index for testing."""
    return QueryIdentityIndex(normalizer, DefaultKeyBuilder(), maxsize=10)


class TestQueryIdentityIndex:
    """Tests for QueryIdentityIndex."""

    def test_same_reference_memoized(
        self, index: QueryIdentityIndex, normalizer: Mock
    ) -> None:
        """Test that a reused document is normalized only once."""
        query = parse("{ jobs { id } }")

        first = index.hash_of(query)
        second = index.hash_of(query)

        assert first == second
        assert normalizer.normalize.call_count == 1
        assert len(index) == 1

    def test_equal_content_same_hash(
        self, index: QueryIdentityIndex, normalizer: Mock
    ) -> None:
        """Test that distinct but equal documents hash identically."""
        first = index.hash_of(parse("{ jobs { id } }"))
        second = index.hash_of(parse("{ jobs { id } }"))

        assert first == second
        assert normalizer.normalize.call_count == 2

    def test_explicit_typename_same_hash(self, index: QueryIdentityIndex) -> None:
        """Test that hashing happens after normalization."""
        implicit = index.hash_of(parse("{ jobs { id } }"))
        explicit = index.hash_of(parse("{ jobs { id __typename } }"))

        assert implicit == explicit

    def test_source_string_and_document_same_hash(
        self, index: QueryIdentityIndex
    ) -> None:
        """Test that source strings hash like their parsed documents."""
        source = "query Jobs { jobs { id } }"

        assert index.hash_of(source) == index.hash_of(parse(source))

    def test_different_content_different_hash(
        self, index: QueryIdentityIndex
    ) -> None:
        """Test that different selections hash differently."""
        assert index.hash_of("{ jobs { id } }") != index.hash_of("{ jobs { title } }")

    def test_memo_is_bounded(self, index: QueryIdentityIndex) -> None:
        """Test that the memo never grows past its size."""
        queries = [parse(f"{{ field{i} {{ id }} }}") for i in range(20)]
        hashes = [index.hash_of(query) for query in queries]

        assert len(index) == 10
        # Evicted entries are recomputed to the same value
        assert index.hash_of(queries[0]) == hashes[0]

    def test_clear(self, index: QueryIdentityIndex, normalizer: Mock) -> None:
        """Test that clearing forces recomputation."""
        query = parse("{ jobs { id } }")
        before = index.hash_of(query)

        index.clear()

        assert len(index) == 0
        assert index.hash_of(query) == before
        assert normalizer.normalize.call_count == 2

    def test_invalid_query_type(self, index: QueryIdentityIndex) -> None:
        """Test that non-query values are rejected."""
        with pytest.raises(TypeError):
            index.hash_of(42)  # type: ignore[arg-type]
