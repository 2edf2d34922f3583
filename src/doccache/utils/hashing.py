"""Hashing utilities for cache key generation."""

import hashlib
import json
from typing import Any


def stable_stringify(value: Any) -> str:
    """Serialize a JSON value so that mapping key order never matters.

    Args:
        value: Any JSON-serializable value.

    Returns:
        Compact JSON text with keys sorted at every level.

    Raises:
        TypeError: If the value contains non-JSON-serializable objects.
        ValueError: If the value contains circular references, NaN or
            infinities, none of which JSON can represent.
    """
    return json.dumps(value, sort_keys=True, separators=(",", ":"), allow_nan=False)


def sha256_hex(text: str) -> str:
    """Return the full hexadecimal SHA-256 digest of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
