"""Operation subscription bus."""

from collections.abc import Callable
from typing import Any

from doccache.core.entities.cache_operation import CacheOperation


class OperationBus:
    """Notifies subscribers of every occurrence of an operation kind.

    Unlike watches, subscribers are not scoped to a cache key and are
    called whether or not anything changed.
    """

    def __init__(self) -> None:
        self._subscribers: dict[CacheOperation, list[Callable[[Any], None]]] = {
            operation: [] for operation in CacheOperation
        }

    def subscribe(
        self,
        operation: CacheOperation | str,
        callback: Callable[[Any], None],
    ) -> Callable[[], None]:
        """Subscribe to an operation kind.

        Args:
            operation: The operation kind, or its string value
                (e.g. ``"writeQuery"``).
            callback: Called with the operation's request.

        Returns:
            A function removing exactly this callback.

        Raises:
            ValueError: If the operation kind is unknown.
        """
        kind = CacheOperation(operation)
        self._subscribers[kind].append(callback)

        def unsubscribe() -> None:
            self._subscribers[kind] = [
                cb for cb in self._subscribers[kind] if cb is not callback
            ]

        return unsubscribe

    def publish(self, operation: CacheOperation, request: Any) -> None:
        """Call every subscriber of an operation kind, in order."""
        for callback in list(self._subscribers[operation]):
            callback(request)

    def subscriber_count(self, operation: CacheOperation | str) -> int:
        """Return the number of subscribers for an operation kind."""
        return len(self._subscribers[CacheOperation(operation)])
