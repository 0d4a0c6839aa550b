"""Normalized decimal value type.

``NormDecimal`` wraps a ``decimal.Decimal`` and keeps it in canonical form:
no trailing fractional zeros and no negative scale. Values that are equal
mathematically are therefore equal, hash alike and serialize to the same
text. All arithmetic is delegated to the engine context and the result is
normalized again.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import decimal
from decimal import Decimal
from typing import Any, ClassVar

from norm_decimal.domain.constants import (
    DEFAULT_INTEGER_KIND,
    INSPECTION_ATTRIBUTES,
)
from norm_decimal.domain.errors import (
    DeserializationError,
    NonFiniteDecimalError,
    ParseError,
)
from norm_decimal.domain.services.aggregation import fold_product, fold_sum
from norm_decimal.domain.services.context import (
    current_context,
    exact_context,
)
from norm_decimal.domain.services.normalization import (
    normalize_decimal,
    scale_of,
)
from norm_decimal.domain.services.pydantic_schema import build_core_schema
from norm_decimal.domain.services.validation import validate_integer_kind
from norm_decimal.utils.decimal_utils import coerce_decimal, is_decimal_operand

Operand = Any


@dataclass(frozen=True, order=True)
class NormDecimal:
    """Decimal value held in canonical form.

    Attributes:
        value: Normalized engine value.
    """

    value: Decimal

    ZERO: ClassVar[NormDecimal]
    ONE: ClassVar[NormDecimal]

    def __post_init__(self) -> None:
        if isinstance(self.value, str):
            raise TypeError(
                "NormDecimal does not accept text; use NormDecimal.parse"
            )
        raw = coerce_decimal(self.value)
        object.__setattr__(
            self,
            "value",
            normalize_decimal(raw, current_context()),
        )

    @classmethod
    def _from_canonical(cls, raw: Decimal) -> NormDecimal:
        """Wrap a raw value as is, skipping normalization."""
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", raw)
        return instance

    # Construction ---------------------------------------------------------

    @classmethod
    def from_decimal(cls, raw: Decimal) -> NormDecimal:
        """Normalize and wrap a raw decimal."""
        return cls(raw)

    @classmethod
    def from_integer(
        cls,
        value: int,
        kind: str = DEFAULT_INTEGER_KIND,
    ) -> NormDecimal:
        """Convert a fixed-width integer.

        Args:
            value: Integer to convert.
            kind: One of ``u8 i8 u16 i16 u32 i32 u64 i64``.

        Returns:
            NormDecimal: Exact decimal of the integer.

        Raises:
            OverflowError: If the value does not fit the kind.
        """
        return cls(validate_integer_kind(value, kind))

    @classmethod
    def parse(cls, text: str) -> NormDecimal:
        """Parse a decimal literal and normalize it.

        Args:
            text: Decimal literal such as ``"1.50"`` or ``"-2e3"``.

        Returns:
            NormDecimal: Normalized value.

        Raises:
            ParseError: If the text is not a finite decimal literal.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        context = current_context()
        try:
            raw = Decimal(text, context)
            if raw.is_finite():
                raw = exact_context(context, raw).create_decimal(raw)
        except (decimal.InvalidOperation, decimal.Overflow) as exc:
            conditions = exc.args[0] if exc.args else ()
            if not isinstance(conditions, list):
                conditions = [type(exc)]
            raise ParseError(text, conditions) from exc
        if not raw.is_finite():
            raise ParseError(text)
        return cls._from_canonical(normalize_decimal(raw, context))

    from_str = parse

    @classmethod
    def from_json_value(cls, value: Any) -> NormDecimal:
        """Build a value from a decoded JSON scalar.

        Args:
            value: ``str``, ``int``, ``float`` or ``Decimal``.

        Returns:
            NormDecimal: Normalized value.

        Raises:
            DeserializationError: If the scalar is not a finite decimal.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or value is None:
            raise DeserializationError(
                f"Expected a decimal, got {type(value).__name__}"
            )
        if isinstance(value, float):
            value = repr(value)
        try:
            if isinstance(value, str):
                return cls.parse(value)
            return cls(value)
        except (ParseError, NonFiniteDecimalError, TypeError) as exc:
            raise DeserializationError(
                f"Invalid decimal value: {value!r}"
            ) from exc

    # Conversion -----------------------------------------------------------

    @property
    def raw(self) -> Decimal:
        """Underlying engine value."""
        return self.value

    def to_decimal(self) -> Decimal:
        return self.value

    def to_json_value(self) -> str:
        """Return the transparent JSON scalar (fixed-point text)."""
        return format(self.value, "f")

    def __str__(self) -> str:
        return format(self.value, "f")

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format(self.value, format_spec)

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)

    # Read-only inspection -------------------------------------------------

    @property
    def scale(self) -> int:
        """Number of fractional digits."""
        return scale_of(self.value)

    @property
    def mantissa(self) -> int:
        """Signed integer coefficient, so that value = mantissa / 10**scale."""
        sign, digits, _ = self.value.as_tuple()
        coefficient = int("".join(map(str, digits))) if digits else 0
        return -coefficient if sign else coefficient

    def is_sign_negative(self) -> bool:
        return self.value.is_signed()

    def is_sign_positive(self) -> bool:
        return not self.value.is_signed()

    def is_zero(self) -> bool:
        return self.value.is_zero()

    def __getattr__(self, name: str) -> Any:
        if name not in INSPECTION_ATTRIBUTES:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return getattr(self.value, name)

    # Arithmetic -----------------------------------------------------------

    def _combine(self, other: Operand, operation: str) -> NormDecimal:
        rhs = coerce_decimal(other)
        context = current_context()
        if operation in ("divide", "remainder") and rhs.is_zero():
            raise decimal.DivisionByZero(f"{operation} of {self} by zero")
        if operation == "remainder":
            context = exact_context(context, self.value, rhs)
        result = getattr(context, operation)(self.value, rhs)
        return type(self)._from_canonical(normalize_decimal(result, context))

    def add(self, other: Operand) -> NormDecimal:
        return self._combine(other, "add")

    def subtract(self, other: Operand) -> NormDecimal:
        return self._combine(other, "subtract")

    def multiply(self, other: Operand) -> NormDecimal:
        return self._combine(other, "multiply")

    def divide(self, other: Operand) -> NormDecimal:
        """Divide by ``other``; a zero divisor raises ``DivisionByZero``."""
        return self._combine(other, "divide")

    def remainder(self, other: Operand) -> NormDecimal:
        """Truncated remainder carrying the sign of ``self``."""
        return self._combine(other, "remainder")

    def negate(self) -> NormDecimal:
        context = current_context()
        return type(self)._from_canonical(
            normalize_decimal(self.value.copy_negate(), context)
        )

    def __neg__(self) -> NormDecimal:
        return self.negate()

    def __pos__(self) -> NormDecimal:
        return type(self)(self.value)

    def __abs__(self) -> NormDecimal:
        return type(self)(self.value.copy_abs())

    # Sign control ---------------------------------------------------------

    def with_sign_negative(self, negative: bool = True) -> NormDecimal:
        """Return this magnitude with the sign forced, without normalizing.

        Forcing zero negative keeps ``-0``; it still equals ``ZERO``.
        """
        magnitude = self.value.copy_abs()
        raw = magnitude.copy_negate() if negative else magnitude
        return type(self)._from_canonical(raw)

    def with_sign_positive(self, positive: bool = True) -> NormDecimal:
        return self.with_sign_negative(not positive)

    # Min / max ------------------------------------------------------------

    def min(self, other: Operand) -> NormDecimal:
        """Return the smaller operand; ties return ``other`` converted."""
        rhs = type(self)(other)
        return self if self.value < rhs.value else rhs

    def max(self, other: Operand) -> NormDecimal:
        """Return the larger operand; ties return ``other`` converted."""
        rhs = type(self)(other)
        return self if self.value > rhs.value else rhs

    # Aggregation ----------------------------------------------------------

    @classmethod
    def sum(cls, values: Iterable[Operand]) -> NormDecimal:
        """Add values left to right starting from ``ZERO``."""
        return fold_sum(values, cls.ZERO)

    @classmethod
    def product(cls, values: Iterable[Operand]) -> NormDecimal:
        """Multiply values left to right starting from ``ONE``."""
        return fold_product(values, cls.ONE)

    # Serialization hooks --------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        return build_core_schema(cls)


def _forward(dunder: str, method: str, reflected: bool = False):
    def operator(self: NormDecimal, other: Operand) -> NormDecimal:
        if not is_decimal_operand(other):
            return NotImplemented
        if reflected:
            return getattr(type(self)(other), method)(self)
        return getattr(self, method)(other)

    operator.__name__ = f"__{'r' if reflected else ''}{dunder}__"
    return operator


for _dunder, _method in (
    ("add", "add"),
    ("sub", "subtract"),
    ("mul", "multiply"),
    ("truediv", "divide"),
    ("mod", "remainder"),
):
    setattr(NormDecimal, f"__{_dunder}__", _forward(_dunder, _method))
    setattr(
        NormDecimal,
        f"__r{_dunder}__",
        _forward(_dunder, _method, reflected=True),
    )

NormDecimal.ZERO = NormDecimal._from_canonical(Decimal(0))
NormDecimal.ONE = NormDecimal._from_canonical(Decimal(1))


__all__ = ["NormDecimal"]
