"""Domain models."""

from .norm_decimal import NormDecimal

__all__ = ["NormDecimal"]
