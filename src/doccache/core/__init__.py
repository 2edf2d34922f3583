"""Core domain layer for doccache."""

from doccache.core.entities import CacheConfig, DiffResult, MissingField
from doccache.core.exceptions import DocCacheError, UnsupportedOperationError
from doccache.core.interfaces import (
    ICache,
    IKeyBuilder,
    IQueryNormalizer,
    ISerializer,
)
from doccache.core.services import BaseCache, DocumentCache, SimpleCache

__all__ = [
    # Entities
    "CacheConfig",
    "DiffResult",
    "MissingField",
    # Errors
    "DocCacheError",
    "UnsupportedOperationError",
    # Interfaces
    "ICache",
    "IKeyBuilder",
    "IQueryNormalizer",
    "ISerializer",
    # Services
    "BaseCache",
    "DocumentCache",
    "SimpleCache",
]
