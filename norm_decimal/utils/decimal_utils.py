"""Helpers for coercing operands into raw decimals."""

from decimal import Decimal


def is_decimal_operand(value) -> bool:
    """Tell whether a value can be converted losslessly into a decimal.

    Args:
        value: Candidate operand.

    Returns:
        bool: True for Decimal, int (not bool) and objects exposing a raw
        ``Decimal`` through a ``raw`` attribute.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (Decimal, int)):
        return True
    return isinstance(getattr(value, "raw", None), Decimal)


def coerce_decimal(value) -> Decimal:
    """Convert an operand into a raw Decimal without rounding.

    Args:
        value: Decimal, int or normalized wrapper.

    Returns:
        Decimal: Raw engine value.

    Raises:
        TypeError: If the operand is not convertible. Floats and strings are
            rejected because they need an explicit parse.
    """
    if not is_decimal_operand(value):
        raise TypeError(
            f"Cannot convert {type(value).__name__} to a decimal operand"
        )
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return value.raw


__all__ = ["is_decimal_operand", "coerce_decimal"]
