"""Two-level document store: query hash -> variables key -> result."""

import copy
from collections.abc import Iterator, Mapping
from typing import Any

from doccache.core.entities.snapshot import META_KEY, is_document_cache, make_meta


class DocumentStore:
    """Holds complete query results keyed by query hash and variables key.

    Entries are opaque and only ever replaced wholesale. The reserved
    ``__META`` record travels with the data so that snapshots identify
    the cache variant that produced them.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {META_KEY: make_meta()}

    def has(self, query_key: str, variables_key: str) -> bool:
        """Check whether a complete entry exists for a key pair."""
        bucket = self._bucket(query_key)
        return bucket is not None and variables_key in bucket

    def get(self, query_key: str, variables_key: str, default: Any = None) -> Any:
        """Return the entry for a key pair, or ``default``."""
        bucket = self._bucket(query_key)
        if bucket is None:
            return default
        return bucket.get(variables_key, default)

    def set(self, query_key: str, variables_key: str, result: Any) -> None:
        """Store or overwrite the entry for a key pair."""
        if query_key == META_KEY:
            raise KeyError(f"{META_KEY!r} is reserved for snapshot metadata")
        self._data.setdefault(query_key, {})[variables_key] = result

    def clear(self) -> None:
        """Drop every entry and reset the metadata record."""
        self._data = {META_KEY: make_meta()}

    @property
    def meta(self) -> dict[str, Any]:
        """The metadata record."""
        return self._data[META_KEY]

    def to_snapshot(self) -> dict[str, Any]:
        """Return the store contents as a plain value.

        The returned structure is a copy of the two-level mapping; the
        result payloads themselves are shared, not cloned.
        """
        snapshot: dict[str, Any] = {META_KEY: copy.deepcopy(self.meta)}
        for query_key, bucket in self._items():
            snapshot[query_key] = dict(bucket)
        return snapshot

    def load_snapshot(self, snapshot: Mapping[str, Any]) -> None:
        """Replace the store contents with a snapshot.

        No merging takes place. Metadata is kept only when it carries
        the DocumentCache tag; otherwise a fresh record is used.
        """
        data: dict[str, Any] = {}
        for query_key, bucket in snapshot.items():
            if query_key == META_KEY:
                continue
            if not isinstance(bucket, Mapping):
                raise TypeError(
                    f"Snapshot entry {query_key!r} must be a mapping of "
                    f"variables keys to results, got {type(bucket).__name__}"
                )
            data[query_key] = dict(bucket)

        data[META_KEY] = self._restored_meta(snapshot)
        self._data = data

    @staticmethod
    def _restored_meta(snapshot: Mapping[str, Any]) -> dict[str, Any]:
        # Foreign or untagged metadata never replaces the variant tag.
        if not is_document_cache(snapshot):
            return make_meta()
        meta = make_meta()
        meta.update(copy.deepcopy(dict(snapshot[META_KEY])))
        return meta

    def _bucket(self, query_key: str) -> dict[str, Any] | None:
        if query_key == META_KEY:
            return None
        return self._data.get(query_key)

    def _items(self) -> Iterator[tuple[str, dict[str, Any]]]:
        for query_key, bucket in self._data.items():
            if query_key != META_KEY:
                yield query_key, bucket

    def __len__(self) -> int:
        """Return the number of cached documents across all queries."""
        return sum(len(bucket) for _, bucket in self._items())
