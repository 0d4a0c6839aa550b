"""Pydantic integration for normalized decimals.

``NormDecimal`` fields validate from the same scalars the JSON codec
accepts and dump to the transparent fixed-point string in JSON mode.
"""

from typing import Any

from pydantic_core import core_schema


def build_core_schema(cls: type) -> core_schema.CoreSchema:
    """Build the pydantic core schema for a ``NormDecimal`` subclass.

    Args:
        cls: The wrapper class.

    Returns:
        core_schema.CoreSchema: Plain validator with a JSON serializer.
    """

    def validate(value: Any):
        return cls.from_json_value(value)

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda value: value.to_json_value(),
            when_used="json",
        ),
    )


__all__ = ["build_core_schema"]
