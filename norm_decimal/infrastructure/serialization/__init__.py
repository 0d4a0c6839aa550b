"""Transparent serialization adapters for normalized decimals."""

from .binary_codec import BinaryDecimalCodec
from .json_codec import JsonDecimalCodec, NormDecimalJSONEncoder, dumps, loads

__all__ = [
    "BinaryDecimalCodec",
    "JsonDecimalCodec",
    "NormDecimalJSONEncoder",
    "dumps",
    "loads",
]
