"""Monetary value objects.

Uses Decimal to avoid floating-point rounding errors that would be
unacceptable in financial calculations. Arithmetic never clamps: a
product or sum that leaves the allowed range comes back as an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable

from ordertaking.domain.exceptions import ValidationError
from ordertaking.domain.model import constrained_type
from ordertaking.domain.model.constrained_type import ConstrainedValue, to_decimal
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.result import Err, Result


@dataclass(frozen=True)
class Price(ConstrainedValue):
    """A decimal between 0.0 and 1000.00."""

    value: Decimal

    MIN = Decimal("0.0")
    MAX = Decimal("1000.00")

    @classmethod
    def create(cls, raw: str | float | int | Decimal) -> Result[Price, ConstraintViolation]:
        return constrained_type.create_decimal(
            "Price", cls._wrap, cls.MIN, cls.MAX, to_decimal(raw)
        )

    @classmethod
    def unsafe_create(cls, raw: str | float | int | Decimal) -> Price:
        """Create a Price that is already known to be in range.

        Raises ValidationError otherwise. Only for trusted constants,
        never for user input.
        """
        result = cls.create(raw)
        if isinstance(result, Err):
            raise ValidationError(
                f"Not expecting Price to be out of bounds: {result.error}"
            )
        return result.value

    @classmethod
    def multiply(
        cls, qty: str | float | int | Decimal, price: Price
    ) -> Result[Price, ConstraintViolation]:
        """Multiply *price* by *qty* and re-check the product's range.

        An infinite *qty* times a zero price has no value and raises
        ValidationError, as any other non-number does.
        """
        try:
            product = to_decimal(qty) * price.value
        except InvalidOperation as exc:
            raise ValidationError(f"Not a number: {qty!r} * {price.value}") from exc
        return cls.create(product)

    def __str__(self) -> str:
        return f"${self.value:.2f}"


@dataclass(frozen=True)
class BillingAmount(ConstrainedValue):
    """A decimal between 0.0 and 10000.00."""

    value: Decimal

    MIN = Decimal("0.0")
    MAX = Decimal("10000.00")

    @classmethod
    def create(
        cls, raw: str | float | int | Decimal
    ) -> Result[BillingAmount, ConstraintViolation]:
        return constrained_type.create_decimal(
            "BillingAmount", cls._wrap, cls.MIN, cls.MAX, to_decimal(raw)
        )

    @classmethod
    def sum_prices(cls, prices: Iterable[Price]) -> Result[BillingAmount, ConstraintViolation]:
        """Total the prices; no prices at all bills ``0.0``."""
        total = sum((p.value for p in prices), Decimal("0.0"))
        return cls.create(total)

    def __str__(self) -> str:
        return f"${self.value:.2f}"
