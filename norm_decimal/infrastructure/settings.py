"""Settings for the decimal engine and optional adapters."""

from dataclasses import dataclass
import decimal
import logging
import os

import dotenv

from norm_decimal.domain.constants import DEFAULT_PRECISION, DEFAULT_ROUNDING
from norm_decimal.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}
_ROUNDING_MODES = {
    name
    for name in dir(decimal)
    if name.startswith("ROUND_")
}


@dataclass(frozen=True)
class DecimalSettings:
    """Settings for the decimal engine context.

    Attributes:
        precision: Significant digits kept by engine operations.
        rounding: Name of a ``decimal`` rounding mode.
        binary_codec_enabled: Whether the 16-byte binary codec may be built.
        log_level: Level name for the package logger.
    """

    precision: int = DEFAULT_PRECISION
    rounding: str = DEFAULT_ROUNDING
    binary_codec_enabled: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "DecimalSettings":
        """Build settings from environment variables.

        Returns:
            DecimalSettings: Settings sourced from the environment (and a
            ``.env`` file when present).
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            precision=cls._parse_precision(
                os.getenv("NORM_DECIMAL_PRECISION"),
                logger=logger,
            ),
            rounding=cls._parse_rounding(
                os.getenv("NORM_DECIMAL_ROUNDING"),
                logger=logger,
            ),
            binary_codec_enabled=cls._parse_flag(
                "NORM_DECIMAL_BINARY_CODEC",
                os.getenv("NORM_DECIMAL_BINARY_CODEC"),
                logger=logger,
            ),
            log_level=cls._parse_log_level(
                os.getenv("NORM_DECIMAL_LOG_LEVEL"),
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_precision(raw: str | None, logger) -> int:
        if raw is None or not raw.strip():
            return DEFAULT_PRECISION
        try:
            precision = int(raw.strip())
        except ValueError:
            precision = 0
        if precision < 1:
            logger.warning(
                f"Invalid NORM_DECIMAL_PRECISION={raw!r}; "
                f"using {DEFAULT_PRECISION}"
            )
            return DEFAULT_PRECISION
        return precision

    @staticmethod
    def _parse_rounding(raw: str | None, logger) -> str:
        if raw is None or not raw.strip():
            return DEFAULT_ROUNDING
        rounding = raw.strip().upper()
        if not rounding.startswith("ROUND_"):
            rounding = f"ROUND_{rounding}"
        if rounding not in _ROUNDING_MODES:
            logger.warning(
                f"Unknown NORM_DECIMAL_ROUNDING={raw!r}; "
                f"using {DEFAULT_ROUNDING}"
            )
            return DEFAULT_ROUNDING
        return rounding

    @staticmethod
    def _parse_flag(name: str, raw: str | None, logger) -> bool:
        if raw is None:
            return False
        cleaned = raw.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned not in _FALSE_VALUES:
            logger.warning(f"Invalid boolean {name}={raw!r}; using false")
        return False

    @staticmethod
    def _parse_log_level(raw: str | None, logger) -> str:
        if raw is None or not raw.strip():
            return "WARNING"
        level = raw.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.warning(
                f"Unknown NORM_DECIMAL_LOG_LEVEL={raw!r}; using WARNING"
            )
            return "WARNING"
        return level


__all__ = ["DecimalSettings"]
