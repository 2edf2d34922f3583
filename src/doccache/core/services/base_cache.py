"""Base cache with the generic parts of the cache contract."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar

from graphql.language import DocumentNode

from doccache.core.entities.cache_operation import QueryLike
from doccache.core.entities.diff_result import DiffResult
from doccache.core.exceptions import UnsupportedOperationError
from doccache.utils.documents import to_document


class BaseCache(ABC):
    """Shared base for cache variants.

    Subclasses implement the required subset of ``ICache`` (the
    abstract methods below). Everything else gets a generic
    implementation here:

    - query helpers (``read_query``, ``write_query``, ``update_query``)
      are built on ``read`` and ``write``;
    - ``modify``, ``remove_optimistic`` and ``evict`` are tolerated
      no-ops in caches without field-level state;
    - fragment operations raise ``UnsupportedOperationError``. They
      are listed in ``UNSUPPORTED_OPERATIONS`` so the unsupported set
      can be inspected without calling anything.
    """

    UNSUPPORTED_OPERATIONS: ClassVar[frozenset[str]] = frozenset(
        {"read_fragment", "write_fragment", "update_fragment"}
    )

    @abstractmethod
    def read(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> Any | None:
        """Return the cached result, or None if nothing is cached."""

    @abstractmethod
    def write(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        result: Any,
    ) -> None:
        """Store a result without notifying anyone."""

    @abstractmethod
    def diff(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> DiffResult:
        """Report whether a query can be answered from the cache."""

    @abstractmethod
    def watch(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        callback: Callable[[DiffResult], None],
    ) -> Callable[[], None]:
        """Register a change watcher; returns its unsubscribe function."""

    @abstractmethod
    def reset(self) -> None:
        """Clear all cached state."""

    @abstractmethod
    def extract(self, optimistic: bool = False) -> dict[str, Any]:
        """Return the cache contents as a plain serializable value."""

    @abstractmethod
    def restore(self, snapshot: Any) -> "BaseCache":
        """Replace the cache contents with a snapshot; returns self."""

    def evict(self, options: Any = None) -> bool:
        """Remove part of the cache.

        Returns:
            Always False: nothing smaller than a whole document is
            addressable, so nothing is ever evicted.
        """
        return False

    def read_query(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> Any | None:
        """Return the cached result of a query, or None."""
        return self.read(query, variables)

    def write_query(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        data: Any,
    ) -> None:
        """Store a query result."""
        self.write(query, variables, data)

    def update_query(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        update: Callable[[Any | None], Any | None],
    ) -> Any | None:
        """Read, transform and write back a query result.

        Args:
            query: The query whose result is updated.
            variables: The variables of the result.
            update: Receives the current result (or None) and returns
                the new one. Returning None leaves the cache untouched.

        Returns:
            The new result, or None if nothing was written.
        """
        data = update(self.read_query(query, variables))
        if data is None:
            return None
        self.write_query(query, variables, data)
        return data

    def modify(self, options: Any = None) -> bool:
        """Patch cached fields in place.

        Returns:
            Always False. Callers tolerate a no-op modify.
        """
        return False

    def transform_document(self, query: QueryLike) -> DocumentNode:
        """Return the document a query is cached under."""
        return to_document(query)

    def perform_transaction(
        self,
        transaction: Callable[["BaseCache"], Any],
        optimistic_id: str | None = None,
    ) -> Any:
        """Run a transaction against this cache.

        There are no optimistic layers, so ``optimistic_id`` is ignored
        and the transaction runs directly against the cache.
        """
        return transaction(self)

    def batch(self, update: Callable[["BaseCache"], Any]) -> Any:
        """Run several operations as one transaction."""
        return self.perform_transaction(update)

    def remove_optimistic(self, id: str) -> None:
        """Drop an optimistic layer. There are none to drop."""

    def read_fragment(self, fragment: QueryLike, id: str, **options: Any) -> Any:
        """Fragments address entities, which this cache does not store."""
        raise UnsupportedOperationError(type(self).__name__, "read_fragment")

    def write_fragment(
        self,
        fragment: QueryLike,
        id: str,
        data: Any,
        **options: Any,
    ) -> None:
        """Fragments address entities, which this cache does not store."""
        raise UnsupportedOperationError(type(self).__name__, "write_fragment")

    def update_fragment(
        self,
        fragment: QueryLike,
        id: str,
        update: Callable[[Any | None], Any | None],
        **options: Any,
    ) -> Any:
        """Fragments address entities, which this cache does not store."""
        raise UnsupportedOperationError(type(self).__name__, "update_fragment")
