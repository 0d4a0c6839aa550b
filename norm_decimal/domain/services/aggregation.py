"""Domain services for folding sequences of decimals."""

from collections.abc import Iterable
from functools import reduce
from typing import TypeVar

T = TypeVar("T")


def fold_sum(values: Iterable, start: T) -> T:
    """Add values left to right.

    Args:
        values: Operands accepted by ``start.add``.
        start: Additive identity; returned unchanged for an empty input.

    Returns:
        Result of ``start.add(v0).add(v1)...``.
    """
    return reduce(lambda total, value: total.add(value), values, start)


def fold_product(values: Iterable, start: T) -> T:
    """Multiply values left to right.

    Args:
        values: Operands accepted by ``start.multiply``.
        start: Multiplicative identity; returned unchanged for an empty input.

    Returns:
        Result of ``start.multiply(v0).multiply(v1)...``.
    """
    return reduce(lambda total, value: total.multiply(value), values, start)


__all__ = ["fold_sum", "fold_product"]
