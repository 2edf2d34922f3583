"""Write requests, watch registrations and operation kinds."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from graphql.language import DocumentNode

if TYPE_CHECKING:
    from doccache.core.entities.diff_result import DiffResult

# A parsed document or the GraphQL source it was parsed from.
QueryLike = Union[DocumentNode, str]


class CacheOperation(Enum):
    """Operation kinds that can be observed on the operation bus."""

    WRITE_QUERY = "writeQuery"


@dataclass(frozen=True)
class WriteQueryRequest:
    """A full ``write_query`` call, as handed to operation subscribers.

    Attributes:
        query: The query document (or source string) that was written.
        variables: The variables the result was written for.
        data: The result payload.
    """

    query: QueryLike
    variables: dict[str, Any] | None
    data: Any


@dataclass(eq=False)
class Watch:
    """A watcher registered for one exact (query, variables) pair.

    Watches compare and hash by identity, so registering the same
    callback twice yields two independent registrations.

    Attributes:
        query: The original query, kept for re-derivation.
        variables: The original variables.
        callback: Called with a complete ``DiffResult`` when the value
            stored at this key changes.
    """

    query: QueryLike
    variables: dict[str, Any] | None
    callback: Callable[["DiffResult"], None]
    query_key: str = field(default="", repr=False)
    variables_key: str = field(default="", repr=False)


WriteQuerySubscriber = Callable[[WriteQueryRequest], None]
