"""Cache capability interface."""

from collections.abc import Callable
from typing import Any, Protocol

from graphql.language import DocumentNode

from doccache.core.entities.cache_operation import (
    CacheOperation,
    QueryLike,
    WriteQuerySubscriber,
)
from doccache.core.entities.diff_result import DiffResult


class ICache(Protocol):
    """Full capability set a GraphQL client runtime expects from a cache.

    Implementations are synchronous: every method runs to completion
    on the calling thread, and callbacks are invoked inline.
    Implementations that cannot offer an operation raise
    ``UnsupportedOperationError`` rather than silently ignoring it.
    """

    def read(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> Any | None:
        """Return the cached result, or None if nothing is cached."""
        ...

    def write(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        result: Any,
    ) -> None:
        """Store a result without notifying anyone."""
        ...

    def write_query(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        data: Any,
    ) -> None:
        """Store a result and notify interested parties."""
        ...

    def read_query(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> Any | None:
        """Return the cached result of a query, or None."""
        ...

    def update_query(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        update: Callable[[Any | None], Any | None],
    ) -> Any | None:
        """Read, transform and write back a query result."""
        ...

    def diff(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> DiffResult:
        """Report whether a query can be answered from the cache."""
        ...

    def watch(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        callback: Callable[[DiffResult], None],
    ) -> Callable[[], None]:
        """Register a change watcher; returns its unsubscribe function."""
        ...

    def evict(self, options: Any = None) -> bool:
        """Remove part of the cache; returns True if anything was removed."""
        ...

    def modify(self, options: Any = None) -> bool:
        """Patch cached fields in place; returns True if anything changed."""
        ...

    def reset(self) -> None:
        """Clear all cached state."""
        ...

    def extract(self, optimistic: bool = False) -> dict[str, Any]:
        """Return the cache contents as a plain serializable value."""
        ...

    def restore(self, snapshot: Any) -> "ICache":
        """Replace the cache contents with a snapshot; returns self."""
        ...

    def transform_document(self, query: QueryLike) -> DocumentNode:
        """Return the canonical form of a query."""
        ...

    def subscribe(
        self,
        operation: CacheOperation | str,
        callback: WriteQuerySubscriber,
    ) -> Callable[[], None]:
        """Observe every occurrence of an operation kind."""
        ...

    def read_fragment(self, fragment: QueryLike, id: str, **options: Any) -> Any:
        """Read a fragment of a cached entity."""
        ...

    def write_fragment(
        self,
        fragment: QueryLike,
        id: str,
        data: Any,
        **options: Any,
    ) -> None:
        """Write a fragment of a cached entity."""
        ...

    def update_fragment(
        self,
        fragment: QueryLike,
        id: str,
        update: Callable[[Any | None], Any | None],
        **options: Any,
    ) -> Any:
        """Read, transform and write back a fragment."""
        ...

    def perform_transaction(
        self,
        transaction: Callable[["ICache"], Any],
        optimistic_id: str | None = None,
    ) -> Any:
        """Run a transaction against this cache."""
        ...

    def remove_optimistic(self, id: str) -> None:
        """Drop an optimistic layer."""
        ...
