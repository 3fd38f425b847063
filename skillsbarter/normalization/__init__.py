"""
Lenient normalization of loosely formatted input into enum members
"""

from .enum_normalizer import (
    EnumNormalizationError,
    FormatError,
    LenientEnumParser,
    UnsupportedValueError,
    normalize_token,
    to_canonical,
)

__all__ = [
    "EnumNormalizationError",
    "FormatError",
    "LenientEnumParser",
    "UnsupportedValueError",
    "normalize_token",
    "to_canonical",
]
