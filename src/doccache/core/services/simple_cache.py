"""Simple cache - the minimal document cache variant."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from doccache.core.entities.cache_operation import QueryLike
from doccache.core.entities.diff_result import DiffResult
from doccache.core.interfaces.key_builder import IKeyBuilder
from doccache.core.services.base_cache import BaseCache
from doccache.infrastructure.key_builders.default import DefaultKeyBuilder
from doccache.utils.documents import print_document

logger = logging.getLogger(__name__)


class SimpleCache(BaseCache):
    """Caches whole query results keyed by the query text as written.

    The smallest thing that satisfies a client runtime: no
    normalization, no hashing, no watches and no snapshot metadata.
    Two queries that differ only by an explicit ``__typename`` are
    cached separately. Every operation is logged at debug level.
    """

    def __init__(self, key_builder: IKeyBuilder | None = None) -> None:
        self._key_builder = key_builder or DefaultKeyBuilder()
        self._cache: dict[str, dict[str, Any]] = {}

    def read(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> Any | None:
        logger.debug("SimpleCache.read")
        query_cache = self._cache.get(print_document(query))
        if query_cache is None:
            return None
        return query_cache.get(self._key_builder.variables_key(variables))

    def write(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        result: Any,
    ) -> None:
        logger.debug("SimpleCache.write")
        query_cache = self._cache.setdefault(print_document(query), {})
        query_cache[self._key_builder.variables_key(variables)] = result

    def diff(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None = None,
    ) -> DiffResult:
        logger.debug("SimpleCache.diff")
        query_cache = self._cache.get(print_document(query), {})
        variables_key = self._key_builder.variables_key(variables)
        if variables_key in query_cache:
            return DiffResult.hit(query_cache[variables_key])
        return DiffResult.miss(query, variables)

    def watch(
        self,
        query: QueryLike,
        variables: dict[str, Any] | None,
        callback: Callable[[DiffResult], None],
    ) -> Callable[[], None]:
        """Watches are accepted but never notified."""
        logger.debug("SimpleCache.watch")
        return lambda: None

    def reset(self) -> None:
        logger.debug("SimpleCache.reset")
        self._cache = {}

    def extract(self, optimistic: bool = False) -> dict[str, Any]:
        logger.debug("SimpleCache.extract")
        return {key: dict(bucket) for key, bucket in self._cache.items()}

    def restore(self, snapshot: Any) -> "SimpleCache":
        logger.debug("SimpleCache.restore")
        if snapshot is None:
            snapshot = {}
        if not isinstance(snapshot, Mapping):
            raise TypeError(
                f"Snapshot must be a mapping, got {type(snapshot).__name__}"
            )
        self._cache = {key: dict(bucket) for key, bucket in snapshot.items()}
        return self

    def evict(self, options: Any = None) -> bool:
        logger.debug("SimpleCache.evict")
        return False
