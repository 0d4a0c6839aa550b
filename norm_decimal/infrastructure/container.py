"""Composition root for wiring decimal codecs."""

from norm_decimal.application.ports.codec import DecimalCodecPort
from norm_decimal.infrastructure.decimal_context import get_settings
from norm_decimal.infrastructure.logging.logger import get_app_logger
from norm_decimal.infrastructure.serialization.binary_codec import (
    BinaryDecimalCodec,
)
from norm_decimal.infrastructure.serialization.json_codec import (
    JsonDecimalCodec,
)


def build_json_codec() -> DecimalCodecPort[str]:
    """Return the JSON codec."""
    return JsonDecimalCodec()


def build_binary_codec() -> DecimalCodecPort[bytes]:
    """Return the binary codec when it is enabled in settings."""
    settings = get_settings()
    if not settings.binary_codec_enabled:
        raise RuntimeError(
            "Binary codec is disabled; set NORM_DECIMAL_BINARY_CODEC=1."
        )
    return BinaryDecimalCodec()


def build_codec(name: str = "json") -> DecimalCodecPort:
    """Return the codec registered under ``name``."""
    normalized = name.strip().lower()
    get_app_logger().debug(f"Building decimal codec: {normalized}")
    if normalized == "json":
        return build_json_codec()
    if normalized == "binary":
        return build_binary_codec()
    raise ValueError(f"Unknown decimal codec: {name!r}")


__all__ = ["build_json_codec", "build_binary_codec", "build_codec"]
