"""Domain normalization helpers."""

from decimal import Context, Decimal

from norm_decimal.domain.errors import NonFiniteDecimalError
from norm_decimal.domain.services.context import exact_context


def normalize_decimal(raw: Decimal, context: Context | None = None) -> Decimal:
    """Return the canonical form of a raw decimal.

    Trailing fractional zeros are stripped, positive exponents produced by
    ``Decimal.normalize`` are expanded back to integer digits and negative
    zero collapses to zero. The value is never rounded: the context is
    widened to the coefficient length and only its exponent limits apply.

    Args:
        raw: Finite decimal value from the engine.
        context: Engine context whose exponent limits apply.

    Returns:
        Decimal: Value with the smallest non-negative scale.

    Raises:
        NonFiniteDecimalError: If the value is NaN or infinite.
    """
    if not raw.is_finite():
        raise NonFiniteDecimalError(f"Cannot normalize non-finite decimal: {raw}")
    if not raw:
        return Decimal(0)
    reduced = raw.normalize(exact_context(context, raw))
    sign, digits, exponent = reduced.as_tuple()
    if exponent > 0:
        reduced = Decimal((sign, digits + (0,) * exponent, 0))
    return reduced


def is_normalized(raw: Decimal) -> bool:
    """Check whether a raw decimal is already canonical.

    Args:
        raw: Decimal value to inspect.

    Returns:
        bool: True when the value has no trailing fractional zeros, a
        non-negative scale and no negative-zero sign.
    """
    if not raw.is_finite():
        return False
    sign, digits, exponent = raw.as_tuple()
    if exponent > 0:
        return False
    if not raw:
        return exponent == 0 and sign == 0
    return exponent == 0 or digits[-1] != 0


def scale_of(raw: Decimal) -> int:
    """Return the number of fractional digits of a finite decimal."""
    exponent = raw.as_tuple().exponent
    return max(-exponent, 0)


__all__ = ["normalize_decimal", "is_normalized", "scale_of"]
