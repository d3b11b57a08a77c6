"""Order quantities.

Widgets are counted in whole units, Gizmos are weighed in kilograms.
Which kind of quantity an order line carries depends on its product
code, not on the shape of the number that was typed in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from ordertaking.domain.model import constrained_type
from ordertaking.domain.model.constrained_type import ConstrainedValue, to_decimal
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.product_code import Gizmo, ProductCode, Widget
from ordertaking.domain.model.result import Result

_ORDER_QUANTITY_VARIANTS = ("UnitQty", "KilogramQty")


@dataclass(frozen=True)
class UnitQuantity(ConstrainedValue):
    """An integer between 1 and 1000."""

    value: int

    MIN = 1
    MAX = 1000

    @classmethod
    def create(cls, field_name: str, raw: int) -> Result[UnitQuantity, ConstraintViolation]:
        return constrained_type.create_int(field_name, cls._wrap, cls.MIN, cls.MAX, raw)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class KilogramQuantity(ConstrainedValue):
    """A decimal between 0.05 and 100.00."""

    value: Decimal

    MIN = Decimal("0.05")
    MAX = Decimal("100.00")

    @classmethod
    def create(
        cls, field_name: str, raw: str | float | int | Decimal
    ) -> Result[KilogramQuantity, ConstraintViolation]:
        return constrained_type.create_decimal(
            field_name, cls._wrap, cls.MIN, cls.MAX, to_decimal(raw)
        )

    def __str__(self) -> str:
        return f"{self.value} kg"


class OrderQuantity(ABC):
    """Either a ``UnitQty`` or a ``KilogramQty``; closed like ``ProductCode``."""

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _ORDER_QUANTITY_VARIANTS:
            raise TypeError(
                f"OrderQuantity is closed; cannot declare variant {cls.__qualname__}"
            )

    @property
    @abstractmethod
    def value(self) -> Decimal:
        """The plain value inside whichever variant this is."""

    @staticmethod
    def create(
        field_name: str,
        product_code: ProductCode,
        quantity: str | float | int | Decimal,
    ) -> Result[OrderQuantity, ConstraintViolation]:
        """Build the quantity kind that matches *product_code*.

        A Widget quantity is truncated toward zero before the unit range
        check, so ``2.9`` widgets become ``2`` rather than an error.
        """
        if isinstance(product_code, Widget):
            amount = to_decimal(quantity)
            if amount.is_infinite():
                # No whole number of units; always outside the unit range.
                return constrained_type.create_decimal(
                    field_name,
                    UnitQty,
                    Decimal(UnitQuantity.MIN),
                    Decimal(UnitQuantity.MAX),
                    amount,
                )
            return UnitQuantity.create(field_name, int(amount)).map(UnitQty)
        if isinstance(product_code, Gizmo):
            return KilogramQuantity.create(field_name, quantity).map(KilogramQty)
        raise TypeError(f"Unknown product code variant: {product_code!r}")


@dataclass(frozen=True)
class UnitQty(OrderQuantity):
    quantity: UnitQuantity

    @property
    def value(self) -> Decimal:
        return Decimal(self.quantity.value)

    def __str__(self) -> str:
        return str(self.quantity)


@dataclass(frozen=True)
class KilogramQty(OrderQuantity):
    quantity: KilogramQuantity

    @property
    def value(self) -> Decimal:
        return self.quantity.value

    def __str__(self) -> str:
        return str(self.quantity)
