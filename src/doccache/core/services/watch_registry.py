"""Watch registry: change watchers per (query hash, variables key)."""

import logging
from collections.abc import Callable

from doccache.core.entities.cache_operation import Watch
from doccache.core.entities.diff_result import DiffResult

logger = logging.getLogger(__name__)


class WatchRegistry:
    """Keeps the watchers registered for each exact cache key.

    Watchers live in insertion-ordered dicts used as sets, so they
    are notified in registration order. A registration is removed
    only by its unsubscribe function; nothing expires on its own.
    """

    def __init__(self) -> None:
        self._watches: dict[str, dict[str, dict[Watch, None]]] = {}

    def add(self, watch: Watch) -> Callable[[], None]:
        """Register a watch under its key pair.

        Args:
            watch: The registration. Its ``query_key`` and
                ``variables_key`` must already be set.

        Returns:
            A function removing exactly this registration. Calling it
            more than once is harmless.
        """
        by_variables = self._watches.setdefault(watch.query_key, {})
        by_variables.setdefault(watch.variables_key, {})[watch] = None

        def unsubscribe() -> None:
            self._remove(watch)

        return unsubscribe

    def watchers(self, query_key: str, variables_key: str) -> list[Watch]:
        """Return the watchers for a key pair, in registration order."""
        return list(self._watches.get(query_key, {}).get(variables_key, {}))

    def notify(self, query_key: str, variables_key: str, result: DiffResult) -> int:
        """Call every watcher of a key pair with a diff result.

        Callbacks run inline. A watcher that unsubscribes (or registers
        new watchers) from inside its callback does not affect who is
        notified by this call.

        Returns:
            The number of watchers notified.
        """
        watches = self.watchers(query_key, variables_key)
        for watch in watches:
            watch.callback(result)
        return len(watches)

    def clear(self) -> None:
        """Drop every registration."""
        self._watches = {}

    def _remove(self, watch: Watch) -> None:
        by_variables = self._watches.get(watch.query_key)
        if by_variables is None:
            return
        watches = by_variables.get(watch.variables_key)
        if watches is None or watch not in watches:
            return

        del watches[watch]
        if not watches:
            del by_variables[watch.variables_key]
        if not by_variables:
            del self._watches[watch.query_key]
        logger.debug("Removed watch for query %s", watch.query_key)

    def __len__(self) -> int:
        """Return the number of active registrations."""
        return sum(
            len(watches)
            for by_variables in self._watches.values()
            for watches in by_variables.values()
        )
