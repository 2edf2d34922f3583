"""Diff result entities."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MissingField:
    """Diagnostic describing why a diff is incomplete.

    A document cache has no field-level granularity, so this is always
    synthesized for the whole document. It exists for callers that
    expect a field-error shape.
    """

    message: str
    path: tuple[str, ...] = ()
    query: Any = None
    variables: dict[str, Any] | None = None


@dataclass(frozen=True)
class DiffResult:
    """Outcome of comparing a query against the cache.

    Attributes:
        result: The cached document, or an empty placeholder when
            incomplete.
        complete: True if the whole document is cached.
        missing: Diagnostics for incomplete results.
    """

    result: Any
    complete: bool
    missing: tuple[MissingField, ...] = field(default=())

    @classmethod
    def hit(cls, result: Any) -> "DiffResult":
        """Create a complete result."""
        return cls(result=result, complete=True)

    @classmethod
    def miss(cls, query: Any, variables: dict[str, Any] | None) -> "DiffResult":
        """Create an incomplete result with a generic diagnostic."""
        return cls(
            result={},
            complete=False,
            missing=(
                MissingField(
                    message="Document not found in cache",
                    query=query,
                    variables=variables,
                ),
            ),
        )
