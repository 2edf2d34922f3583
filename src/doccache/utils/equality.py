"""Deep equality for JSON-like query results."""

from collections.abc import Mapping
from typing import Any


def deep_equal(a: Any, b: Any) -> bool:
    """Compare two result payloads structurally.

    Unlike ``==``, booleans never equal numbers (``True`` vs ``1``), so
    flipping a JSON boolean to a number counts as a change. Integers
    and floats are both JSON numbers and compare by value. Lists and
    tuples are both JSON arrays.
    """
    if a is b:
        return True

    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if isinstance(a, Mapping):
        if not isinstance(b, Mapping) or len(a) != len(b):
            return False
        return all(key in b and deep_equal(value, b[key]) for key, value in a.items())

    if isinstance(a, (list, tuple)):
        if not isinstance(b, (list, tuple)) or len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))

    if isinstance(b, (Mapping, list, tuple)):
        return False

    return bool(a == b)
