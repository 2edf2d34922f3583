"""Document cache - caches whole query results instead of entities."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from graphql.language import DocumentNode

from doccache.core.entities.cache_config import CacheConfig
from doccache.core.entities.cache_operation import (
    CacheOperation,
    QueryLike,
    Watch,
    WriteQueryRequest,
    WriteQuerySubscriber,
)
from doccache.core.entities.diff_result import DiffResult
from doccache.core.entities.snapshot import is_document_cache
from doccache.core.interfaces.key_builder import IKeyBuilder
from doccache.core.interfaces.normalizer import IQueryNormalizer
from doccache.core.services.base_cache import BaseCache
from doccache.core.services.document_store import DocumentStore
from doccache.core.services.operation_bus import OperationBus
from doccache.core.services.query_identity import QueryIdentityIndex
from doccache.core.services.watch_registry import WatchRegistry
from doccache.infrastructure.key_builders.default import DefaultKeyBuilder
from doccache.infrastructure.normalizers.typename import TypenameNormalizer
from doccache.utils.equality import deep_equal

logger = logging.getLogger(__name__)

_MISSING = object()


class DocumentCache(BaseCache):
    """Cache of whole query results, keyed by query plus variables.

    Instead of normalizing entities, each (query, variables) pair maps
    to the complete result that was written for it. This saves all the
    bookkeeping of an entity graph, at the cost of:

    1. No sharing between queries: fetching a list of items does not
       make a single item readable from the cache.
    2. No ``modify``: change a result by writing the whole query again
       with ``write_query``.

    All operations are synchronous. Watch and subscription callbacks
    run inline on the thread that called ``write_query`` and may call
    back into the cache. There is no locking; share an instance across
    threads only with external serialization.
    """

    def __init__(
        self,
        config: CacheConfig | None = None,
        normalizer: IQueryNormalizer | None = None,
        key_builder: IKeyBuilder | None = None,
    ) -> None:
        """Initialize the document cache.

        Args:
            config: Optional cache configuration. Uses defaults if not provided.
            normalizer: Produces canonical queries. Defaults to a
                ``TypenameNormalizer`` honouring ``config.add_typename``.
            key_builder: Builds query and variables keys.
        """
        self._config = config or CacheConfig()
        self._normalizer = normalizer or TypenameNormalizer(
            add_typename=self._config.add_typename
        )
        self._key_builder = key_builder or DefaultKeyBuilder()

        self._store = DocumentStore()
        self._watches = WatchRegistry()
        self._operations = OperationBus()
        self._queries = QueryIdentityIndex(
            self._normalizer,
            self._key_builder,
            maxsize=self._config.query_memo_size,
        )

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    def make_query_key(self, query: QueryLike) -> str:
        """Return the content hash a query is cached under."""
        return self._queries.hash_of(query)

    def make_variables_key(self, variables: dict[str, Any] | None) -> str:
        """Return the order-independent key of a variables map."""
        return self._key_builder.variables_key(variables)

    def read(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> Any | None:
        """Return the cached result for a query and variables.

        Args:
            query: The query document or source.
            variables: The query variables.

        Returns:
            The last result written for exactly this pair, or None.
        """
        self._log("read")
        return self._store.get(
            self.make_query_key(query),
            self.make_variables_key(variables),
        )

    def write(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        result: Any,
    ) -> None:
        """Store a result, overwriting any previous one.

        This is the raw path used by client runtimes to persist
        responses. It does not notify watchers or subscribers.
        """
        self._log("write")
        self._store.set(
            self.make_query_key(query),
            self.make_variables_key(variables),
            result,
        )

    def write_query(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        data: Any,
    ) -> None:
        """Store a result and broadcast it.

        Watchers of this exact pair are called with the new result
        only if it differs from what was stored (a missing entry counts
        as different). ``writeQuery`` subscribers are called on every
        write, changed or not. Values are compared with ``deep_equal``,
        so ``True`` replacing ``1`` is a change.

        Callbacks run inline and their exceptions are not caught: the
        new result is already stored, but if a watcher raises, later
        watchers and all ``writeQuery`` subscribers are skipped and the
        error propagates to the caller.

        Args:
            query: The query document or source.
            variables: The query variables.
            data: The complete result.
        """
        query_key = self.make_query_key(query)
        variables_key = self.make_variables_key(variables)
        cached = self._store.get(query_key, variables_key, _MISSING)

        is_diff = cached is _MISSING or not deep_equal(cached, data)

        super().write_query(query, variables, data)

        if is_diff:
            notified = self._watches.notify(
                query_key, variables_key, DiffResult.hit(data)
            )
            logger.debug(
                "Query %s changed, notified %d watcher(s)", query_key, notified
            )

        self._operations.publish(
            CacheOperation.WRITE_QUERY,
            WriteQueryRequest(query=query, variables=variables, data=data),
        )

    def diff(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> DiffResult:
        """All-or-nothing diff: either the whole result is cached or none of it."""
        self._log("diff")
        query_key = self.make_query_key(query)
        variables_key = self.make_variables_key(variables)

        if self._store.has(query_key, variables_key):
            return DiffResult.hit(self._store.get(query_key, variables_key))
        return DiffResult.miss(query, variables)

    def watch(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        callback: Callable[[DiffResult], None],
    ) -> Callable[[], None]:
        """Watch changes on this exact query/variables combination.

        Returns:
            An unsubscribe function removing only this registration.
        """
        self._log("watch")
        watch = Watch(
            query=query,
            variables=variables,
            callback=callback,
            query_key=self.make_query_key(query),
            variables_key=self.make_variables_key(variables),
        )
        return self._watches.add(watch)

    def subscribe(
        self,
        operation: CacheOperation | str,
        callback: WriteQuerySubscriber,
    ) -> Callable[[], None]:
        """Subscribe to every occurrence of a cache operation.

        Args:
            operation: The operation kind; only ``"writeQuery"`` exists.
            callback: Called with the full ``WriteQueryRequest``.

        Returns:
            An unsubscribe function.
        """
        return self._operations.subscribe(operation, callback)

    def evict(self, options: Any = None) -> bool:
        """Partial eviction is not possible in a document cache.

        Returns:
            Always False. No entry is touched.
        """
        self._log("evict")
        return False

    def reset(self) -> None:
        """Clear cached documents, watches and memoized query hashes.

        Operation subscribers live as long as the instance and are kept.
        """
        self._store.clear()
        self._watches.clear()
        self._queries.clear()
        logger.debug("DocumentCache reset")

    def extract(self, optimistic: bool = False) -> dict[str, Any]:
        """Return the cached documents as a plain serializable value.

        Args:
            optimistic: Accepted for compatibility and ignored; there
                are no optimistic layers.

        Returns:
            The snapshot, including the ``__META`` record.
        """
        self._log("extract")
        return self._store.to_snapshot()

    def restore(self, snapshot: Any) -> "DocumentCache":
        """Replace the cached documents with a snapshot.

        Args:
            snapshot: A value previously returned by ``extract()``.
                None is treated as an empty snapshot.

        Returns:
            This cache, for chaining.

        Raises:
            TypeError: If the snapshot is not a mapping.
        """
        if snapshot is None:
            snapshot = {}
        if not isinstance(snapshot, Mapping):
            raise TypeError(
                f"Snapshot must be a mapping, got {type(snapshot).__name__}"
            )
        if snapshot and not is_document_cache(snapshot):
            logger.warning(
                "Restoring a snapshot without DocumentCache metadata; "
                "it may have been produced by another cache"
            )

        self._store.load_snapshot(snapshot)
        logger.debug("Restored %d cached document(s)", len(self._store))
        return self

    def transform_document(self, query: QueryLike) -> DocumentNode:
        """Return the canonical form a query is hashed in."""
        return self._queries.canonical(query)

    def _log(self, operation: str) -> None:
        if self._config.log_operations:
            logger.debug("DocumentCache.%s", operation)
