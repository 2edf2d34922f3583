"""Pytest configuration for doccache tests."""

import pytest
from graphql import parse
from graphql.language import DocumentNode


@pytest.fixture(autouse=True)
def reset_provider():
    """Reset the process-wide cache handle around each test."""
    import doccache.provider

    # Store original value
    original_cache = doccache.provider._cache

    yield

    # Restore original value after test
    doccache.provider._cache = original_cache


@pytest.fixture
def jobs_query() -> DocumentNode:
    """A query with a nested object selection."""
    return parse(
        """
        query Jobs($id: ID) {
          jobs(id: $id) {
            id
            title
          }
        }
        """
    )
