"""JSON codec for shipping cache snapshots between processes."""

import json
from datetime import date, datetime
from typing import Any

from doccache.core.entities.snapshot import META_KEY, is_document_cache
from doccache.core.exceptions import DocCacheError

_DATETIME_TAG = "__datetime__"
_DATE_TAG = "__date__"


class SerializationError(DocCacheError):
    """Raised when a snapshot cannot be encoded or decoded."""


class JsonSerializer:
    """Encodes ``extract()`` snapshots as JSON bytes and back.

    Output is compact with sorted keys, so equal snapshots always
    produce identical payloads that can be embedded in a page and
    compared or cached by content. Dates and datetimes inside cached
    results are tagged on the way out and restored on the way in.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        """Encode a snapshot (or any JSON-like value) to bytes.

        Raises:
            SerializationError: If the value holds objects JSON cannot
                represent, or circular references.
        """
        try:
            text = json.dumps(
                value,
                default=_encode_tagged,
                sort_keys=True,
                separators=(",", ":"),
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e
        return text.encode(self._encoding)

    def deserialize(self, data: bytes) -> Any:
        """Decode bytes produced by ``serialize``.

        Raises:
            SerializationError: If the payload is not valid JSON in the
                configured encoding, or a tagged date is malformed.
        """
        try:
            return json.loads(data.decode(self._encoding), object_hook=_decode_tagged)
        except (ValueError, UnicodeDecodeError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def deserialize_snapshot(self, data: bytes) -> dict[str, Any]:
        """Decode a payload that must hold a DocumentCache snapshot.

        Use this on the receiving side of a page transfer, before
        handing the value to ``DocumentCache.restore``.

        Raises:
            SerializationError: If the payload does not decode to a
                mapping tagged by ``__META`` as a DocumentCache snapshot.
        """
        snapshot = self.deserialize(data)
        if not is_document_cache(snapshot):
            raise SerializationError(
                f"Payload is not a DocumentCache snapshot (missing {META_KEY} tag)"
            )
        return snapshot


def _encode_tagged(obj: Any) -> Any:
    if isinstance(obj, datetime):
        return {_DATETIME_TAG: obj.isoformat()}
    if isinstance(obj, date):
        return {_DATE_TAG: obj.isoformat()}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _decode_tagged(obj: dict[str, Any]) -> Any:
    if len(obj) == 1:
        if _DATETIME_TAG in obj:
            return datetime.fromisoformat(obj[_DATETIME_TAG])
        if _DATE_TAG in obj:
            return date.fromisoformat(obj[_DATE_TAG])
    return obj
