"""Infrastructure layer implementations for doccache."""

from doccache.infrastructure.key_builders import DefaultKeyBuilder
from doccache.infrastructure.normalizers import TypenameNormalizer
from doccache.infrastructure.serializers import JsonSerializer, SerializationError

__all__ = [
    "DefaultKeyBuilder",
    "TypenameNormalizer",
    "JsonSerializer",
    "SerializationError",
]
