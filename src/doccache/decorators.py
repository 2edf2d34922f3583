"""Cache-first fetch decorator.

Wraps a synchronous fetcher so that a query result is served from a
document cache when present and fetched (then cached) otherwise.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from doccache.core.entities.cache_operation import QueryLike
from doccache.core.interfaces.cache import ICache
from doccache.provider import current_cache

F = TypeVar("F", bound=Callable[..., Any])


def cache_first(
    query: QueryLike,
    cache: ICache | None = None,
) -> Callable[[F], F]:
    """Decorator serving a query from the cache before fetching it.

    The decorated function receives the variables map and returns the
    complete result. Results are stored with ``write_query`` so that
    watchers of the same query see them.

    Args:
        query: The query the fetcher answers.
        cache: The cache to use. Defaults to the process-wide cache;
            if none is configured the fetcher is called directly.

    Returns:
        Decorated function.

    Example:
        @cache_first(JOBS_QUERY, cache=cache)
        def fetch_jobs(variables: dict | None = None) -> dict:
            return client.execute(JOBS_QUERY, variables)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(variables: dict[str, Any] | None = None) -> Any:
            target = cache if cache is not None else current_cache()
            if target is None:
                # Cache not configured, execute directly
                return func(variables)

            diff = target.diff(query, variables)
            if diff.complete:
                return diff.result

            result = func(variables)
            target.write_query(query, variables, result)
            return result

        return wrapper  # type: ignore

    return decorator
