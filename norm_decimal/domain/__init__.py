"""Domain package for the normalized decimal type and its rules."""

from .constants import DEFAULT_INTEGER_KIND, INTEGER_KINDS
from .errors import (
    DeserializationError,
    NonFiniteDecimalError,
    ParseError,
    SerializationError,
)
from .models import NormDecimal
from .services import is_normalized, normalize_decimal

__all__ = [
    "NormDecimal",
    "DEFAULT_INTEGER_KIND",
    "INTEGER_KINDS",
    "DeserializationError",
    "NonFiniteDecimalError",
    "ParseError",
    "SerializationError",
    "is_normalized",
    "normalize_decimal",
]
