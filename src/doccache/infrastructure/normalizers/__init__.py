"""Query normalizer implementations."""

from doccache.infrastructure.normalizers.typename import TypenameNormalizer

__all__ = ["TypenameNormalizer"]
