"""Core interfaces (Protocol classes) for doccache."""

from doccache.core.interfaces.cache import ICache
from doccache.core.interfaces.key_builder import IKeyBuilder
from doccache.core.interfaces.normalizer import IQueryNormalizer
from doccache.core.interfaces.serializer import ISerializer

__all__ = [
    "ICache",
    "IKeyBuilder",
    "IQueryNormalizer",
    "ISerializer",
]
