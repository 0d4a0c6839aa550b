"""SQLAlchemy column type for normalized decimals.

``NormDecimalType`` binds the bare engine ``Decimal`` and loads rows back as
normalized ``NormDecimal`` values, so the wrapper can be used directly as a
query parameter or result field on any backend ``Numeric`` column.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy.engine import Dialect
from sqlalchemy.types import Numeric, TypeDecorator

from norm_decimal.domain.models import NormDecimal
from norm_decimal.utils.decimal_utils import coerce_decimal


class NormDecimalType(TypeDecorator):
    """Transparent ``Numeric`` column holding ``NormDecimal`` values.

    Args:
        precision: Column precision passed to ``Numeric``.
        scale: Column scale passed to ``Numeric``.
    """

    impl = Numeric
    cache_ok = True

    def __init__(
        self,
        precision: Optional[int] = None,
        scale: Optional[int] = None,
    ) -> None:
        super().__init__(precision=precision, scale=scale, asdecimal=True)

    def process_bind_param(
        self,
        value,
        dialect: Dialect,
    ) -> Optional[Decimal]:
        if value is None:
            return None
        return coerce_decimal(value)

    def process_result_value(
        self,
        value,
        dialect: Dialect,
    ) -> Optional[NormDecimal]:
        if value is None:
            return None
        return NormDecimal(value)

    @property
    def python_type(self) -> type:
        return NormDecimal


__all__ = ["NormDecimalType"]
