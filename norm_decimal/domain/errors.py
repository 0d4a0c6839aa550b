"""Errors raised by the normalized decimal type and its codecs.

Division by zero is not redefined here: arithmetic surfaces the engine's own
``decimal.DivisionByZero`` (a ``ZeroDivisionError``).
"""

from collections.abc import Sequence


class ParseError(ValueError):
    """Text is not a valid finite decimal literal.

    Attributes:
        text: The rejected input.
        conditions: Engine signals reported for the input, if any.
    """

    def __init__(self, text: str, conditions: Sequence[type] = ()) -> None:
        self.text = text
        self.conditions = list(conditions)
        names = ", ".join(condition.__name__ for condition in self.conditions)
        detail = f" ({names})" if names else ""
        super().__init__(f"Invalid decimal literal: {text!r}{detail}")


class NonFiniteDecimalError(ValueError):
    """A raw value is NaN or infinite and cannot be normalized."""


class DeserializationError(ValueError):
    """An external representation does not hold a valid decimal."""


class SerializationError(ValueError):
    """A value cannot be written in the requested external layout."""


__all__ = [
    "ParseError",
    "NonFiniteDecimalError",
    "DeserializationError",
    "SerializationError",
]
