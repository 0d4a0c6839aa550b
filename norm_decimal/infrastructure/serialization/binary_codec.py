"""Fixed 16-byte binary codec for normalized decimals.

Layout: four little-endian unsigned 32-bit words ``flags, hi, lo, mid``.
``flags`` carries the scale in bits 16-23 and the sign in bit 31; the
96-bit mantissa is ``hi << 64 | mid << 32 | lo``.
"""

from decimal import Decimal
import struct

from norm_decimal.domain.constants import (
    BINARY_LAYOUT,
    BINARY_MANTISSA_BITS,
    BINARY_MAX_SCALE,
    BINARY_SCALE_MASK,
    BINARY_SCALE_SHIFT,
    BINARY_SIGN_MASK,
    BINARY_SIZE,
)
from norm_decimal.domain.errors import DeserializationError, SerializationError
from norm_decimal.domain.models import NormDecimal
from norm_decimal.infrastructure.logging.logger import get_app_logger

_WORD_MASK = 0xFFFFFFFF
_LAYOUT = struct.Struct(BINARY_LAYOUT)


def pack_decimal(raw: Decimal) -> bytes:
    """Pack a finite decimal into the 16-byte layout.

    Args:
        raw: Decimal with a scale of at most 28 and a 96-bit mantissa.

    Returns:
        bytes: Encoded value.

    Raises:
        SerializationError: If the value does not fit the layout.
    """
    if not raw.is_finite():
        raise SerializationError(f"Cannot encode non-finite decimal: {raw}")
    sign, digits, exponent = raw.as_tuple()
    mantissa = int("".join(map(str, digits)))
    if exponent > 0:
        mantissa *= 10**exponent
        exponent = 0
    scale = -exponent
    if scale > BINARY_MAX_SCALE:
        raise SerializationError(
            f"Scale {scale} exceeds binary maximum {BINARY_MAX_SCALE}: {raw}"
        )
    if mantissa.bit_length() > BINARY_MANTISSA_BITS:
        raise SerializationError(
            f"Mantissa of {raw} exceeds {BINARY_MANTISSA_BITS} bits"
        )
    flags = scale << BINARY_SCALE_SHIFT
    if sign:
        flags |= BINARY_SIGN_MASK
    return _LAYOUT.pack(
        flags,
        mantissa >> 64,
        mantissa & _WORD_MASK,
        (mantissa >> 32) & _WORD_MASK,
    )


def unpack_decimal(data: bytes) -> Decimal:
    """Unpack the 16-byte layout into a raw decimal.

    Raises:
        DeserializationError: If the length or flags are invalid.
    """
    if len(data) != BINARY_SIZE:
        raise DeserializationError(
            f"Expected {BINARY_SIZE} bytes, got {len(data)}"
        )
    flags, hi, lo, mid = _LAYOUT.unpack(data)
    if flags & ~(BINARY_SCALE_MASK | BINARY_SIGN_MASK):
        raise DeserializationError(f"Unknown flag bits set: {flags:#010x}")
    scale = (flags & BINARY_SCALE_MASK) >> BINARY_SCALE_SHIFT
    if scale > BINARY_MAX_SCALE:
        raise DeserializationError(
            f"Scale {scale} exceeds binary maximum {BINARY_MAX_SCALE}"
        )
    mantissa = (hi << 64) | (mid << 32) | lo
    sign = 1 if flags & BINARY_SIGN_MASK else 0
    return Decimal((sign, tuple(int(d) for d in str(mantissa)), -scale))


class BinaryDecimalCodec:
    """Codec between ``NormDecimal`` and the 16-byte layout."""

    def encode(self, value: NormDecimal) -> bytes:
        return pack_decimal(value.raw)

    def decode(self, data: bytes) -> NormDecimal:
        """Decode and normalize a 16-byte value.

        Raises:
            DeserializationError: If the bytes do not hold a valid decimal.
        """
        try:
            raw = unpack_decimal(bytes(data))
        except DeserializationError as exc:
            get_app_logger().warning(f"Rejected binary decimal: {exc}")
            raise
        return NormDecimal(raw)


__all__ = [
    "BinaryDecimalCodec",
    "pack_decimal",
    "unpack_decimal",
]
