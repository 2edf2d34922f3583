"""Typename-adding query normalizer."""

from typing import Any

from graphql.language import (
    DocumentNode,
    FieldNode,
    NameNode,
    OperationDefinitionNode,
    SelectionSetNode,
    Visitor,
    visit,
)

TYPENAME = "__typename"


def _typename_field() -> FieldNode:
    return FieldNode(
        alias=None,
        name=NameNode(value=TYPENAME),
        arguments=(),
        directives=(),
        selection_set=None,
    )


class _AddTypenameVisitor(Visitor):
    """Appends ``__typename`` to every non-root selection set."""

    def leave_selection_set(
        self,
        node: SelectionSetNode,
        _key: Any,
        parent: Any,
        *_args: Any,
    ) -> SelectionSetNode | None:
        # Root fields of an operation are never typed objects themselves.
        if isinstance(parent, OperationDefinitionNode):
            return None

        for selection in node.selections:
            # Already requested, or an introspection selection set.
            if isinstance(selection, FieldNode) and selection.name.value.startswith(
                "__"
            ):
                return None

        return SelectionSetNode(
            selections=(*node.selections, _typename_field()),
            loc=node.loc,
        )


class TypenameNormalizer:
    """Canonicalizes queries by adding ``__typename`` to object selections.

    Two queries that select the same fields become indistinguishable
    whether or not the caller asked for ``__typename`` explicitly.
    The rewrite is delegated to graphql-core's AST visitor, so the
    input document is never mutated.
    """

    def __init__(self, add_typename: bool = True) -> None:
        """Initialize the normalizer.

        Args:
            add_typename: If False, documents are returned unchanged.
        """
        self._add_typename = add_typename

    @property
    def add_typename(self) -> bool:
        """Whether ``__typename`` fields are added."""
        return self._add_typename

    def normalize(self, document: DocumentNode) -> DocumentNode:
        """Return the canonical form of a query document.

        Args:
            document: The query as issued by the caller.

        Returns:
            The document with ``__typename`` added to every selection set
            except the root selection set of each operation.
        """
        if not self._add_typename:
            return document
        return visit(document, _AddTypenameVisitor())
