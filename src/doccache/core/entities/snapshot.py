"""Snapshot layout shared by every DocumentCache.

A snapshot maps query hashes to a mapping of variables keys to result
payloads. The reserved ``__META`` entry tags which cache variant
produced it::

    {
        "__META": {"type": "DocumentCache", "extraRootIds": []},
        "<query hash>": {"<variables key>": <result>},
    }
"""

from collections.abc import Mapping
from typing import Any

META_KEY = "__META"
DOCUMENT_CACHE_TYPE = "DocumentCache"


def make_meta() -> dict[str, Any]:
    """Create a fresh metadata record."""
    return {"type": DOCUMENT_CACHE_TYPE, "extraRootIds": []}


def make_snapshot() -> dict[str, Any]:
    """Create an empty snapshot carrying the metadata record."""
    return {META_KEY: make_meta()}


def is_document_cache(snapshot: Any) -> bool:
    """Check whether a snapshot was produced by a DocumentCache.

    Args:
        snapshot: Any value, typically the result of ``extract()``.

    Returns:
        True if the snapshot carries the DocumentCache metadata tag.
    """
    if not isinstance(snapshot, Mapping):
        return False
    meta = snapshot.get(META_KEY)
    return isinstance(meta, Mapping) and meta.get("type") == DOCUMENT_CACHE_TYPE


def is_using_document_cache(cache: Any) -> bool:
    """Check whether a cache handle is backed by a DocumentCache."""
    return is_document_cache(cache.extract())
