"""Query identity index: memoized content hashes of query documents."""

from cachetools import LRUCache  # type: ignore[import-untyped]
from graphql.language import DocumentNode

from doccache.core.entities.cache_operation import QueryLike
from doccache.core.interfaces.key_builder import IKeyBuilder
from doccache.core.interfaces.normalizer import IQueryNormalizer
from doccache.utils.documents import to_document


class QueryIdentityIndex:
    """Maps query references to the hash of their canonical form.

    Hashes are memoized per object identity in a bounded LRU cache.
    Each memo entry keeps the query it was computed for, and a hit is
    only accepted when that stored object *is* the queried one, so a
    recycled ``id()`` can never yield another query's hash. Content
    hashing stays the source of truth: a distinct but equal query
    simply misses the memo and recomputes the same hash.
    """

    def __init__(
        self,
        normalizer: IQueryNormalizer,
        key_builder: IKeyBuilder,
        maxsize: int = 1000,
    ) -> None:
        """Initialize the index.

        Args:
            normalizer: Produces the canonical form that is hashed.
            key_builder: Digests canonical documents.
            maxsize: Maximum number of memoized query references.
        """
        self._normalizer = normalizer
        self._key_builder = key_builder
        self._memo: LRUCache[int, tuple[QueryLike, str]] = LRUCache(maxsize=maxsize)

    def hash_of(self, query: QueryLike) -> str:
        """Return the content hash of a query.

        Args:
            query: A parsed document or GraphQL source string.

        Returns:
            The digest of the normalized query.
        """
        entry = self._memo.get(id(query))
        if entry is not None and entry[0] is query:
            return entry[1]

        query_hash = self._key_builder.query_key(self.canonical(query))
        self._memo[id(query)] = (query, query_hash)
        return query_hash

    def canonical(self, query: QueryLike) -> DocumentNode:
        """Return the normalized document for a query."""
        return self._normalizer.normalize(to_document(query))

    def clear(self) -> None:
        """Forget every memoized hash."""
        self._memo.clear()

    def __len__(self) -> int:
        """Return the number of memoized query references."""
        return len(self._memo)
