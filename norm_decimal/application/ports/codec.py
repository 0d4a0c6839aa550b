"""Codec ports for the normalized decimal type.

This module defines the application-layer protocol for external
representations of ``NormDecimal``. Infrastructure codecs implement it and
must stay transparent: a wrapped value is encoded exactly like the bare
engine decimal, and decoding always normalizes.
"""

from typing import Protocol, TypeVar

from norm_decimal.domain.models import NormDecimal

EncodedT = TypeVar("EncodedT")


class DecimalCodecPort(Protocol[EncodedT]):
    """Port encoding and decoding normalized decimals."""

    def encode(self, value: NormDecimal) -> EncodedT:
        """Encode a value.

        Args:
            value: Normalized decimal to encode.

        Returns:
            EncodedT: External representation.
        """

    def decode(self, data: EncodedT) -> NormDecimal:
        """Decode a value.

        Args:
            data: External representation.

        Returns:
            NormDecimal: Normalized decoded value.

        Raises:
            DeserializationError: If the data is not a valid decimal.
        """


__all__ = ["DecimalCodecPort"]
