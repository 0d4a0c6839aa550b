"""Domain constants for normalized decimals."""

import decimal

# Fixed-width integer kinds accepted by NormDecimal.from_integer.
# Each entry maps the kind name to (bits, signed).
INTEGER_KINDS = {
    "u8": (8, False),
    "i8": (8, True),
    "u16": (16, False),
    "i16": (16, True),
    "u32": (32, False),
    "i32": (32, True),
    "u64": (64, False),
    "i64": (64, True),
}

DEFAULT_INTEGER_KIND = "i64"

# Read-only Decimal attributes forwarded by NormDecimal.__getattr__.
INSPECTION_ATTRIBUTES = frozenset(
    {
        "adjusted",
        "as_integer_ratio",
        "as_tuple",
        "is_finite",
        "is_normal",
        "is_signed",
        "is_subnormal",
        "number_class",
        "radix",
        "to_eng_string",
    }
)

DEFAULT_PRECISION = 28
DEFAULT_ROUNDING = "ROUND_HALF_EVEN"

# Engine signals raised as exceptions instead of setting flags.
TRAPPED_SIGNALS = (
    decimal.InvalidOperation,
    decimal.DivisionByZero,
    decimal.Overflow,
)

# 16-byte binary layout: flags, hi, lo, mid as little-endian u32 words.
BINARY_LAYOUT = "<IIII"
BINARY_SIZE = 16
BINARY_MAX_SCALE = 28
BINARY_SCALE_SHIFT = 16
BINARY_SCALE_MASK = 0x00FF0000
BINARY_SIGN_MASK = 0x80000000
BINARY_MANTISSA_BITS = 96


__all__ = [
    "INTEGER_KINDS",
    "DEFAULT_INTEGER_KIND",
    "INSPECTION_ATTRIBUTES",
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "TRAPPED_SIGNALS",
    "BINARY_LAYOUT",
    "BINARY_SIZE",
    "BINARY_MAX_SCALE",
    "BINARY_SCALE_SHIFT",
    "BINARY_SCALE_MASK",
    "BINARY_SIGN_MASK",
    "BINARY_MANTISSA_BITS",
]
