"""Application ports."""

from .codec import DecimalCodecPort

__all__ = ["DecimalCodecPort"]
