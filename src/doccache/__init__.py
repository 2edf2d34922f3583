"""doccache - Whole-document query result cache for GraphQL clients.

Caches the complete result of each (query, variables) pair instead of
normalizing entities. Queries are keyed by the SHA-256 of their
canonical form (``__typename`` added to every selection set), and
variables by an order-independent JSON encoding. Supports change
watchers, write subscriptions and snapshot transfer between processes.

Example:
    from graphql import parse
    from doccache import DocumentCache

    JOBS = parse('''
        query Jobs($id: ID) {
            jobs(id: $id) { id title }
        }
    ''')

    cache = DocumentCache()

    def on_change(diff):
        print("jobs changed:", diff.result)

    unsubscribe = cache.watch(JOBS, {"id": "1"}, on_change)

    cache.write_query(JOBS, {"id": "1"}, {"jobs": [{"id": "1"}]})
    cache.read(JOBS, {"id": "1"})   # {"jobs": [{"id": "1"}]}
    cache.read(JOBS, {"id": "2"})   # None
    cache.diff(JOBS, {"id": "2"}).complete   # False

    unsubscribe()

Snapshot transfer:
    from doccache import JsonSerializer, create_cache

    payload = JsonSerializer().serialize(cache.extract())
    hydrated = create_cache(initial_state=JsonSerializer().deserialize_snapshot(payload))
"""

from doccache.core.entities import (
    DOCUMENT_CACHE_TYPE,
    META_KEY,
    CacheConfig,
    CacheOperation,
    DiffResult,
    MissingField,
    QueryLike,
    Watch,
    WriteQueryRequest,
    is_document_cache,
    is_using_document_cache,
    make_snapshot,
)
from doccache.core.exceptions import DocCacheError, UnsupportedOperationError
from doccache.core.interfaces import (
    ICache,
    IKeyBuilder,
    IQueryNormalizer,
    ISerializer,
)
from doccache.core.services import BaseCache, DocumentCache, SimpleCache
from doccache.decorators import cache_first
from doccache.infrastructure import (
    DefaultKeyBuilder,
    JsonSerializer,
    SerializationError,
    TypenameNormalizer,
)
from doccache.provider import configure, create_cache, get_cache

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Caches
    "BaseCache",
    "DocumentCache",
    "SimpleCache",
    # Core entities
    "CacheConfig",
    "CacheOperation",
    "DiffResult",
    "MissingField",
    "QueryLike",
    "Watch",
    "WriteQueryRequest",
    # Snapshots
    "DOCUMENT_CACHE_TYPE",
    "META_KEY",
    "is_document_cache",
    "is_using_document_cache",
    "make_snapshot",
    # Errors
    "DocCacheError",
    "UnsupportedOperationError",
    "SerializationError",
    # Core interfaces
    "ICache",
    "IKeyBuilder",
    "IQueryNormalizer",
    "ISerializer",
    # Infrastructure implementations
    "DefaultKeyBuilder",
    "JsonSerializer",
    "TypenameNormalizer",
    # Cache handle lifecycle
    "configure",
    "create_cache",
    "get_cache",
    # Decorators
    "cache_first",
]
