"""Decimal engine context for the normalized decimal type.

The engine context is built once from ``DecimalSettings`` and cached as a
template. Every caller receives its own copy, so flags raised by one
operation never leak into another thread or into the thread-local
``decimal`` context.
"""

import decimal
from decimal import Context
from typing import Optional

from norm_decimal.domain.constants import TRAPPED_SIGNALS
from norm_decimal.infrastructure.logging.logger import get_app_logger
from norm_decimal.infrastructure.settings import DecimalSettings

_context_template: Optional[Context] = None
_settings: Optional[DecimalSettings] = None


def _build_context(settings: DecimalSettings) -> Context:
    """Create an engine context from settings.

    Args:
        settings: Engine settings.

    Returns:
        Context: Context with the configured precision and rounding and
        the arithmetic error signals trapped.
    """
    return Context(
        prec=settings.precision,
        rounding=getattr(decimal, settings.rounding),
        traps=list(TRAPPED_SIGNALS),
    )


def get_settings() -> DecimalSettings:
    """Get the settings singleton, loading it from the environment once."""
    global _settings
    if _settings is None:
        _settings = DecimalSettings.from_env()
    return _settings


def get_decimal_context() -> Context:
    """Get a private copy of the configured engine context.

    Returns:
        Context: Fresh copy of the lazily built context template.
    """
    global _context_template
    if _context_template is None:
        settings = get_settings()
        logger = get_app_logger()
        logger.set_level(settings.log_level)
        _context_template = _build_context(settings)
        logger.info(
            f"Decimal context configured: prec={settings.precision}, "
            f"rounding={settings.rounding}"
        )
    return _context_template.copy()


def configure(settings: DecimalSettings) -> None:
    """Replace the active settings and rebuild the context on next use."""
    global _settings, _context_template
    _settings = settings
    _context_template = None


def reset_decimal_context() -> None:
    """Forget cached settings and context so they reload from the environment."""
    global _settings, _context_template
    _settings = None
    _context_template = None


__all__ = [
    "TRAPPED_SIGNALS",
    "get_settings",
    "get_decimal_context",
    "configure",
    "reset_decimal_context",
]
