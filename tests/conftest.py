"""Shared fixtures for the test suite."""

import pytest

from norm_decimal.infrastructure import decimal_context
from norm_decimal.infrastructure import settings as settings_module

_ENV_VARS = (
    "NORM_DECIMAL_PRECISION",
    "NORM_DECIMAL_ROUNDING",
    "NORM_DECIMAL_BINARY_CODEC",
    "NORM_DECIMAL_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_decimal_context(monkeypatch):
    """Load settings from a clean environment for every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    decimal_context.reset_decimal_context()
    yield
    decimal_context.reset_decimal_context()
