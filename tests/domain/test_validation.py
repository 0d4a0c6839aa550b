"""Tests for integer kind validation."""

import pytest

from norm_decimal.domain.services.validation import (
    integer_bounds,
    validate_integer_kind,
)


def test_integer_bounds() -> None:
    """Bounds follow the width and signedness of each kind."""
    assert integer_bounds("u8") == (0, 255)
    assert integer_bounds("i16") == (-32768, 32767)
    assert integer_bounds("u64") == (0, 18446744073709551615)


def test_validate_integer_kind_returns_value() -> None:
    """Values in range pass through unchanged."""
    assert validate_integer_kind(-5, "i8") == -5


def test_validate_integer_kind_rejects_out_of_range() -> None:
    """Values outside the kind raise OverflowError."""
    with pytest.raises(OverflowError):
        validate_integer_kind(-1, "u32")


@pytest.mark.parametrize("value", [True, 1.0, "1"])
def test_validate_integer_kind_rejects_non_int(value) -> None:
    """Only real ints are integer primitives."""
    with pytest.raises(TypeError):
        validate_integer_kind(value, "i32")


def test_integer_bounds_rejects_unknown_kind() -> None:
    """Unknown kinds are reported with the known names."""
    with pytest.raises(ValueError, match="u8"):
        integer_bounds("i7")
