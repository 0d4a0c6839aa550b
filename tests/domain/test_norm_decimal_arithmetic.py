"""Tests for NormDecimal arithmetic."""

import decimal
from decimal import Decimal

import pytest

from norm_decimal import NormDecimal
from norm_decimal.domain.services import is_normalized

D = NormDecimal.parse

PAIRS = [
    ("1.25", "1.75"),
    ("0.1", "0.2"),
    ("100", "0.5"),
    ("-3.5", "3.5"),
    ("2.5", "4"),
]


@pytest.mark.parametrize(("left", "right"), PAIRS)
def test_results_stay_normalized(left: str, right: str) -> None:
    """Sums, differences and products never keep trailing zeros."""
    a, b = D(left), D(right)

    for result in (a + b, a - b, a * b):
        assert is_normalized(result.value)


def test_add_strips_trailing_zeros() -> None:
    """1.25 + 1.75 should store 3, not 3.00."""
    result = D("1.25") + D("1.75")

    assert str(result) == "3"
    assert result.scale == 0


def test_operators_accept_mixed_operands() -> None:
    """Ints, raw decimals and wrappers work on either side."""
    value = D("2.5")

    assert value * 4 == NormDecimal(10)
    assert value + Decimal("0.50") == NormDecimal(3)
    assert 10 - NormDecimal(3) == NormDecimal(7)
    assert Decimal("2") * NormDecimal(3) == NormDecimal(6)
    assert 1 / NormDecimal(4) == D("0.25")
    assert 7 % NormDecimal(4) == NormDecimal(3)


def test_named_methods_match_operators() -> None:
    """Named methods and operators share one implementation."""
    a, b = D("7.5"), D("2.5")

    assert a.add(b) == a + b
    assert a.subtract(b) == a - b
    assert a.multiply(b) == a * b
    assert a.divide(b) == a / b == NormDecimal(3)
    assert a.remainder(b) == a % b == NormDecimal.ZERO
    assert a.negate() == -a == D("-7.5")


def test_division_uses_engine_precision() -> None:
    """Non-terminating quotients round to the context precision."""
    result = NormDecimal(1) / 3

    assert str(result) == "0." + "3" * 28


def test_remainder_takes_sign_of_dividend() -> None:
    """Remainder follows truncated division."""
    assert NormDecimal(7) % 3 == NormDecimal(1)
    assert NormDecimal(-7) % 3 == NormDecimal(-1)
    assert D("0.5") % D("0.3") == D("0.2")


@pytest.mark.parametrize("dividend", [NormDecimal(5), NormDecimal(0), D("-1.5")])
def test_division_and_remainder_by_zero_fail(dividend: NormDecimal) -> None:
    """A zero divisor raises the engine's DivisionByZero."""
    with pytest.raises(decimal.DivisionByZero):
        dividend / 0
    with pytest.raises(ZeroDivisionError):
        dividend % NormDecimal.ZERO
    with pytest.raises(decimal.DivisionByZero):
        dividend.divide(Decimal("0.00"))


def test_negating_zero_does_not_show_negative_zero() -> None:
    """-0 is collapsed by negation."""
    result = -NormDecimal.ZERO

    assert str(result) == "0"
    assert not result.is_sign_negative()


def test_abs_and_pos() -> None:
    """abs and unary plus return normalized values."""
    assert abs(D("-1.50")) == D("1.5")
    assert +D("2.0") == NormDecimal(2)


def test_compound_assignment_rebinds() -> None:
    """Augmented assignment applies the binary operator."""
    value = NormDecimal(1)
    original = value

    value += D("0.50")
    assert value == D("1.5")
    value -= 1
    assert value == D("0.5")
    value *= 4
    assert value == NormDecimal(2)
    value /= 4
    assert value == D("0.5")
    value %= D("0.3")
    assert value == D("0.2")
    assert original == NormDecimal(1)


@pytest.mark.parametrize("operand", [1.5, "1", True, None, [1]])
def test_unsupported_operands_raise_type_error(operand) -> None:
    """Floats, text and bools are not implicit operands."""
    value = NormDecimal(1)

    with pytest.raises(TypeError):
        value + operand
    with pytest.raises(TypeError):
        operand * value
    with pytest.raises(TypeError):
        value.add(operand)


def test_remainder_of_wide_dividend() -> None:
    """Remainders stay exact when the quotient exceeds the precision."""
    assert D("1e30") % 7 == NormDecimal(10**30 % 7)
    assert D("-1e40") % D("0.3") == D("-0.1")
    assert D("123456789012345678901234567890.25") % 10 == D("0.25")


def test_negate_keeps_digits_beyond_precision() -> None:
    """Negation only flips the sign."""
    wide = NormDecimal(10**30 + 1)

    assert int(-wide) == -(10**30 + 1)
    assert is_normalized((-wide).raw)
