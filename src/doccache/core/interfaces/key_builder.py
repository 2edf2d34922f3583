"""Key builder interface."""

from typing import Any, Protocol

from graphql.language import DocumentNode


class IKeyBuilder(Protocol):
    """Contract for building the two halves of a document cache key.

    Key builders must be deterministic: equal inputs always produce
    equal keys, within and across processes.
    """

    def query_key(self, document: DocumentNode) -> str:
        """Build the content key of an already-normalized query.

        Args:
            document: The canonical query document.

        Returns:
            A fixed-length string identifying the document's content.
        """
        ...

    def variables_key(self, variables: dict[str, Any] | None) -> str:
        """Build an order-independent key for a variables map.

        Args:
            variables: The operation variables, or None when absent.

        Returns:
            A string equal for any two maps with the same key/value pairs.
        """
        ...
