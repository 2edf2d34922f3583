"""Cache configuration entity."""

from dataclasses import dataclass


@dataclass
class CacheConfig:
    """Cache configuration.

    Mirrors the handful of options a document cache actually honours.
    Options that only make sense for a normalized entity cache are
    not accepted.

    Attributes:
        add_typename: Add ``__typename`` to every non-root selection set
            before hashing a query. Disable to key queries exactly as
            written.
        query_memo_size: Maximum number of query references whose hash
            is memoized. Dropping an entry only costs a recompute.
        log_operations: Emit a debug record for every cache operation.
    """

    add_typename: bool = True
    query_memo_size: int = 1000
    log_operations: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.query_memo_size < 1:
            raise ValueError(
                f"query_memo_size must be at least 1, got {self.query_memo_size}"
            )
