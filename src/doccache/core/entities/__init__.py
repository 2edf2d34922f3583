"""Domain entities for doccache."""

from doccache.core.entities.cache_config import CacheConfig
from doccache.core.entities.cache_operation import (
    CacheOperation,
    QueryLike,
    Watch,
    WriteQueryRequest,
    WriteQuerySubscriber,
)
from doccache.core.entities.diff_result import DiffResult, MissingField
from doccache.core.entities.snapshot import (
    DOCUMENT_CACHE_TYPE,
    META_KEY,
    is_document_cache,
    is_using_document_cache,
    make_snapshot,
)

__all__ = [
    "CacheConfig",
    "CacheOperation",
    "QueryLike",
    "Watch",
    "WriteQueryRequest",
    "WriteQuerySubscriber",
    "DiffResult",
    "MissingField",
    # Snapshot layout
    "DOCUMENT_CACHE_TYPE",
    "META_KEY",
    "is_document_cache",
    "is_using_document_cache",
    "make_snapshot",
]
