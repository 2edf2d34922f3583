"""Exceptions raised by doccache."""


class DocCacheError(Exception):
    """Base class for doccache errors."""


class UnsupportedOperationError(DocCacheError, NotImplementedError):
    """Raised when a cache variant does not offer an operation.

    This is a programming error, not a transient failure. Retrying
    the call can never succeed.
    """

    def __init__(self, cache_name: str, operation: str) -> None:
        self.cache_name = cache_name
        self.operation = operation
        super().__init__(f"{cache_name}: cache.{operation} is not implemented")
