"""Cache handle lifecycle.

Collaborators should receive a cache explicitly (``create_cache``).
Applications that want one cache per process can register it here
with ``configure`` and look it up with ``get_cache``; this module is
the only place that holds such a process-wide handle.

Example:
    from doccache import JsonSerializer, get_cache

    # Server side: render, then ship the snapshot with the page.
    payload = JsonSerializer().serialize(get_cache().extract())

    # Client side: hydrate a fresh cache from the payload.
    cache = get_cache(
        force_new=True,
        initial_state=JsonSerializer().deserialize(payload),
    )
"""

from typing import Any

from doccache.core.entities.cache_config import CacheConfig
from doccache.core.services.document_cache import DocumentCache

_cache: DocumentCache | None = None


def create_cache(
    config: CacheConfig | None = None,
    initial_state: Any = None,
) -> DocumentCache:
    """Create a new document cache, optionally hydrated from a snapshot.

    Args:
        config: Optional cache configuration.
        initial_state: A snapshot previously returned by ``extract()``.

    Returns:
        A new DocumentCache instance.
    """
    return DocumentCache(config).restore(initial_state)


def configure(cache: DocumentCache) -> None:
    """Register the process-wide cache.

    Args:
        cache: The cache instance to share.
    """
    global _cache
    _cache = cache


def current_cache() -> DocumentCache | None:
    """Get the process-wide cache.

    Returns:
        The registered cache, or None if none has been created yet.
    """
    return _cache


def get_cache(
    force_new: bool = False,
    config: CacheConfig | None = None,
    initial_state: Any = None,
) -> DocumentCache:
    """Get the process-wide cache, creating it on first use.

    Args:
        force_new: Replace the current cache with a new one.
        config: Configuration for a newly created cache.
        initial_state: Snapshot to hydrate a newly created cache with.
            Ignored when an existing cache is returned.

    Returns:
        The process-wide DocumentCache.
    """
    global _cache
    if _cache is None or force_new:
        _cache = create_cache(config, initial_state)
    return _cache
