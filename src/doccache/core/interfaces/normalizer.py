"""Query normalizer interface."""

from typing import Protocol

from graphql.language import DocumentNode


class IQueryNormalizer(Protocol):
    """Contract for producing the canonical form of a query.

    Normalizers are pure: the same input document always yields the
    same canonical document, and the input is never mutated.
    """

    def normalize(self, document: DocumentNode) -> DocumentNode:
        """Return the canonical form of a query document.

        Args:
            document: The query as issued by the caller.

        Returns:
            A structurally canonical document.
        """
        ...
