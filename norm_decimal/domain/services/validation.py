"""Domain validation helpers."""

from norm_decimal.domain.constants import INTEGER_KINDS


def integer_bounds(kind: str) -> tuple[int, int]:
    """Return the inclusive range of a fixed-width integer kind.

    Args:
        kind: Kind name such as ``"u8"`` or ``"i64"``.

    Returns:
        tuple[int, int]: Minimum and maximum representable values.

    Raises:
        ValueError: If the kind is unknown.
    """
    try:
        bits, signed = INTEGER_KINDS[kind]
    except KeyError:
        known = ", ".join(INTEGER_KINDS)
        raise ValueError(
            f"Unknown integer kind {kind!r}; expected one of: {known}"
        ) from None
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def validate_integer_kind(value: int, kind: str) -> int:
    """Check that an integer fits the given fixed-width kind.

    Args:
        value: Integer to check.
        kind: Kind name such as ``"u8"`` or ``"i64"``.

    Returns:
        int: The unchanged value.

    Raises:
        TypeError: If the value is not an int (bool is rejected).
        OverflowError: If the value is outside the kind's range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Expected int for kind {kind}, got {type(value).__name__}"
        )
    low, high = integer_bounds(kind)
    if value < low or value > high:
        raise OverflowError(
            f"Value {value} out of range for {kind} [{low}, {high}]"
        )
    return value


__all__ = ["integer_bounds", "validate_integer_kind"]
