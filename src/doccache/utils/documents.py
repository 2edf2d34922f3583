"""Helpers for working with GraphQL documents."""

from graphql import parse
from graphql.language import DocumentNode, print_ast

from doccache.core.entities.cache_operation import QueryLike


def to_document(query: QueryLike) -> DocumentNode:
    """Return a query as a parsed document.

    Documents are returned unchanged. Source strings are parsed
    without location information so that two parses of the same text
    compare equal.

    Raises:
        graphql.GraphQLError: If a source string is not valid GraphQL.
        TypeError: If the query is neither a document nor a string.
    """
    if isinstance(query, DocumentNode):
        return query
    if isinstance(query, str):
        return parse(query, no_location=True)
    raise TypeError(
        f"Expected a DocumentNode or GraphQL source string, "
        f"got {type(query).__name__}"
    )


def print_document(query: QueryLike) -> str:
    """Print a query in graphql-core's canonical text layout."""
    return print_ast(to_document(query))
