"""CLI command that runs a single raw value through its factory."""

from __future__ import annotations

from typing import Callable

import click
import structlog

from ordertaking.domain.exceptions import DomainException
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.money import BillingAmount, Price
from ordertaking.domain.model.product_code import GizmoCode, ProductCode, WidgetCode
from ordertaking.domain.model.quantity import KilogramQuantity, UnitQuantity
from ordertaking.domain.model.result import Err, Result
from ordertaking.domain.model.value_objects import (
    EmailAddress,
    OrderId,
    OrderLineId,
    PromotionCode,
    String50,
    UsStateCode,
    VipStatus,
    ZipCode,
)

logger = structlog.get_logger(__name__)


def _unit_quantity(field_name: str, raw: str) -> Result[UnitQuantity, ConstraintViolation]:
    try:
        units = int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid unit quantity '{raw}'. Expected an integer.")
    return UnitQuantity.create(field_name, units)


FACTORIES: dict[str, Callable[[str, str], Result]] = {
    "string50": String50.create,
    "email": EmailAddress.create,
    "zip-code": ZipCode.create,
    "state": UsStateCode.create,
    "order-id": OrderId.create,
    "order-line-id": OrderLineId.create,
    "promotion-code": PromotionCode.create,
    "widget-code": WidgetCode.create,
    "gizmo-code": GizmoCode.create,
    "product-code": ProductCode.create,
    "unit-quantity": _unit_quantity,
    "kilogram-quantity": KilogramQuantity.create,
    "price": lambda field_name, raw: Price.create(raw),
    "billing-amount": lambda field_name, raw: BillingAmount.create(raw),
    "vip-status": VipStatus.create,
}


@click.command("check")
@click.argument("kind", type=click.Choice(sorted(FACTORIES)))
@click.argument("raw")
@click.option("--field", "field_name", default=None, help="Field name used in error messages.")
def check(kind: str, raw: str, field_name: str | None) -> None:
    """Validate RAW as a value of KIND and print the result."""
    factory = FACTORIES[kind]

    try:
        result = factory(field_name or kind, raw)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(result, Err):
        logger.debug("value_rejected", kind=kind, error_kind=result.error.kind.value)
        raise click.ClickException(str(result.error))

    value = result.value
    logger.debug("value_accepted", kind=kind)
    click.echo(f"OK {type(value).__name__} {value}")
