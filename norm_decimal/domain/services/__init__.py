"""Domain services for normalization, validation and aggregation."""

from .aggregation import fold_product, fold_sum
from .context import (
    current_context,
    exact_context,
    set_context_provider,
)
from .normalization import is_normalized, normalize_decimal, scale_of
from .validation import integer_bounds, validate_integer_kind

__all__ = [
    "fold_product",
    "fold_sum",
    "current_context",
    "exact_context",
    "set_context_provider",
    "is_normalized",
    "normalize_decimal",
    "scale_of",
    "integer_bounds",
    "validate_integer_kind",
]
