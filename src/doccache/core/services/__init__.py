"""Domain services for doccache."""

from doccache.core.services.base_cache import BaseCache
from doccache.core.services.document_cache import DocumentCache
from doccache.core.services.document_store import DocumentStore
from doccache.core.services.operation_bus import OperationBus
from doccache.core.services.query_identity import QueryIdentityIndex
from doccache.core.services.simple_cache import SimpleCache
from doccache.core.services.watch_registry import WatchRegistry

__all__ = [
    "BaseCache",
    "DocumentCache",
    "SimpleCache",
    # Building blocks
    "DocumentStore",
    "OperationBus",
    "QueryIdentityIndex",
    "WatchRegistry",
]
