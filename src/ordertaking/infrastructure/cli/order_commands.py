"""CLI commands for pricing order lines."""

from __future__ import annotations

import click
import structlog

from ordertaking.application.dto import UnvalidatedOrderLine
from ordertaking.application.price_order_lines import PriceOrderLinesHandler
from ordertaking.domain.exceptions import DomainException
from ordertaking.domain.model.result import Err

logger = structlog.get_logger(__name__)


def _parse_line(raw: str) -> UnvalidatedOrderLine:
    """Parse 'L1:W1234:3:15.00' into an UnvalidatedOrderLine."""
    parts = [part.strip() for part in raw.split(":")]
    if len(parts) != 4:
        raise click.BadParameter(
            f"Invalid line format '{raw}'. Expected 'LineId:ProductCode:Quantity:UnitPrice'."
        )
    line_id, code, qty, unit_price = parts
    return UnvalidatedOrderLine(
        order_line_id=line_id,
        product_code=code,
        quantity=qty,
        unit_price=unit_price,
    )


@click.command("quote")
@click.option(
    "--line",
    "raw_lines",
    multiple=True,
    help="Order line as 'LineId:ProductCode:Quantity:UnitPrice'. Repeatable.",
)
def quote(raw_lines: tuple[str, ...]) -> None:
    """Price order lines and show the amount to bill."""
    lines = [_parse_line(raw) for raw in raw_lines]

    try:
        result = PriceOrderLinesHandler().handle(lines)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(result, Err):
        logger.debug("quote_rejected", error_kind=result.error.kind.value)
        raise click.ClickException(str(result.error))

    dto = result.value
    logger.debug("quote_priced", lines=len(dto.lines))

    click.echo(f"  {'Line':<10} {'Product':<8} {'Qty':>10} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*52}")
    for item in dto.lines:
        click.echo(
            f"  {item.order_line_id:<10} {item.product_code:<8} {item.quantity:>10} "
            f"{item.unit_price:>10} {item.line_price:>10}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Billing Amount':<30} {dto.billing_amount:>22}")
