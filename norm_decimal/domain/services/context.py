"""Engine context provider for the domain layer.

The domain never builds its context from settings itself. The
infrastructure layer registers a provider at import time; until it does,
a context with the default precision and rounding is used.
"""

from collections.abc import Callable
import decimal
from decimal import Context, Decimal

from norm_decimal.domain.constants import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    TRAPPED_SIGNALS,
)

ContextProvider = Callable[[], Context]


def _default_context() -> Context:
    return Context(
        prec=DEFAULT_PRECISION,
        rounding=getattr(decimal, DEFAULT_ROUNDING),
        traps=list(TRAPPED_SIGNALS),
    )


_provider: ContextProvider = _default_context


def set_context_provider(provider: ContextProvider) -> None:
    """Register the callable that supplies engine contexts.

    Args:
        provider: Callable returning a context the caller may mutate.
    """
    global _provider
    _provider = provider


def current_context() -> Context:
    """Return a context from the registered provider."""
    return _provider()


def exact_context(context: Context | None, *values: Decimal) -> Context:
    """Copy a context with enough precision to hold values exactly.

    The precision is widened to the digit span running from the most
    significant digit to the least significant exponent among ``values``,
    so no operation bounded by that span rounds.

    Args:
        context: Base context; the thread context when None.
        *values: Finite decimals that must fit without rounding.

    Returns:
        Context: Private copy with at least the base precision.
    """
    exact = (decimal.getcontext() if context is None else context).copy()
    nonzero = [value for value in values if value]
    if nonzero:
        span = (
            max(value.adjusted() for value in nonzero)
            - min(value.as_tuple().exponent for value in nonzero)
            + 1
        )
        exact.prec = max(exact.prec, span)
    return exact


__all__ = [
    "ContextProvider",
    "current_context",
    "exact_context",
    "set_context_provider",
]
