"""JSON codec for normalized decimals.

A ``NormDecimal`` is written exactly as a bare decimal would be: a JSON
string holding its fixed-point text. No wrapper envelope or tag is added.
"""

from decimal import Decimal
import json
from typing import Any

from norm_decimal.domain.errors import DeserializationError
from norm_decimal.domain.models import NormDecimal
from norm_decimal.infrastructure.logging.logger import get_app_logger


class NormDecimalJSONEncoder(json.JSONEncoder):
    """JSON encoder writing decimals as fixed-point strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, NormDecimal):
            return o.to_json_value()
        if isinstance(o, Decimal):
            return format(o, "f")
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize ``obj`` to JSON, encoding decimals transparently."""
    kwargs.setdefault("cls", NormDecimalJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(text: str | bytes, **kwargs: Any) -> Any:
    """Parse JSON, reading float literals as exact ``Decimal`` values.

    Raises:
        DeserializationError: If the text is not valid JSON.
    """
    kwargs.setdefault("parse_float", Decimal)
    try:
        return json.loads(text, **kwargs)
    except json.JSONDecodeError as exc:
        get_app_logger().warning(f"Invalid JSON document: {exc}")
        raise DeserializationError(f"Invalid JSON document: {exc}") from exc


class JsonDecimalCodec:
    """Codec between ``NormDecimal`` and a JSON document holding one scalar."""

    def encode(self, value: NormDecimal) -> str:
        return dumps(value)

    def decode(self, data: str | bytes) -> NormDecimal:
        """Decode a JSON scalar into a normalized decimal.

        String and number literals are both accepted; "1.50" and 1.50
        decode to the same value.

        Raises:
            DeserializationError: If the document is not a decimal scalar.
        """
        decoded = loads(data)
        try:
            return NormDecimal.from_json_value(decoded)
        except DeserializationError as exc:
            get_app_logger().warning(f"Rejected JSON decimal {data!r}: {exc}")
            raise


__all__ = ["NormDecimalJSONEncoder", "JsonDecimalCodec", "dumps", "loads"]
