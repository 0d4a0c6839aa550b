"""Normalized decimal value type.

``NormDecimal`` keeps every decimal in canonical form so that equal values
compare, hash and serialize identically.
"""

from norm_decimal.domain import (
    DeserializationError,
    NonFiniteDecimalError,
    NormDecimal,
    ParseError,
    SerializationError,
)
from norm_decimal.domain.services.context import set_context_provider
from norm_decimal.infrastructure.decimal_context import get_decimal_context

set_context_provider(get_decimal_context)

__version__ = "0.1.0"

__all__ = [
    "NormDecimal",
    "ParseError",
    "DeserializationError",
    "NonFiniteDecimalError",
    "SerializationError",
]
