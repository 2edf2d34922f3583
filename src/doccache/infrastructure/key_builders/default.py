"""Default key builder implementation."""

from typing import Any

from graphql.language import DocumentNode, print_ast

from doccache.utils.hashing import sha256_hex, stable_stringify

EMPTY_VARIABLES_KEY = "{}"


class DefaultKeyBuilder:
    """Default key builder using SHA-256 and stable JSON.

    Query keys are the SHA-256 hex digest of graphql-core's printed
    form of the canonical document. Variables keys are compact JSON
    with sorted keys, so insertion order never affects them.
    """

    def query_key(self, document: DocumentNode) -> str:
        """Build the content key of an already-normalized query.

        Args:
            document: The canonical query document.

        Returns:
            A 64 character hexadecimal digest.
        """
        return sha256_hex(print_ast(document))

    def variables_key(self, variables: dict[str, Any] | None) -> str:
        """Build an order-independent key for a variables map.

        Args:
            variables: The operation variables. None and an empty map
                produce the same key.

        Returns:
            Stable JSON text for the variables.

        Raises:
            TypeError: If a variable value is not JSON-serializable.
        """
        if variables is None:
            return EMPTY_VARIABLES_KEY
        return stable_stringify(variables)
