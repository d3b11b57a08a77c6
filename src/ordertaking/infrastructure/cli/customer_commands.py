"""CLI commands for customer details and addresses."""

from __future__ import annotations

import click
import structlog

from ordertaking.application.dto import UnvalidatedAddress, UnvalidatedCustomerInfo
from ordertaking.application.validate_address import ValidateAddressHandler
from ordertaking.application.validate_customer import ValidateCustomerHandler
from ordertaking.domain.model.result import Err

logger = structlog.get_logger(__name__)


@click.command("customer")
@click.option("--first", "first_name", required=True, help="First name.")
@click.option("--last", "last_name", required=True, help="Last name.")
@click.option("--email", required=True, help="Email address.")
@click.option("--vip", "vip_status", default="Normal", show_default=True, help="'Normal' or 'VIP'.")
def customer(first_name: str, last_name: str, email: str, vip_status: str) -> None:
    """Validate customer details (stops at the first bad field)."""
    result = ValidateCustomerHandler().handle(
        UnvalidatedCustomerInfo(
            first_name=first_name,
            last_name=last_name,
            email_address=email,
            vip_status=vip_status,
        )
    )

    if isinstance(result, Err):
        logger.debug("customer_rejected", field=result.error.field_name)
        raise click.ClickException(str(result.error))

    info = result.value
    click.echo(f"Customer: {info.name}")
    click.echo(f"Email:    {info.email_address}")
    click.echo(f"Status:   {info.vip_status}")


@click.command("address")
@click.option("--line1", required=True, help="Address line 1.")
@click.option("--line2", default="", help="Address line 2 (optional).")
@click.option("--line3", default="", help="Address line 3 (optional).")
@click.option("--line4", default="", help="Address line 4 (optional).")
@click.option("--city", required=True, help="City.")
@click.option("--zip", "zip_code", required=True, help="Five digit zip code.")
@click.option("--state", required=True, help="Two letter US state code.")
@click.option("--country", required=True, help="Country.")
def address(
    line1: str,
    line2: str,
    line3: str,
    line4: str,
    city: str,
    zip_code: str,
    state: str,
    country: str,
) -> None:
    """Validate an address (reports every bad field)."""
    result = ValidateAddressHandler().handle(
        UnvalidatedAddress(
            address_line1=line1,
            address_line2=line2,
            address_line3=line3,
            address_line4=line4,
            city=city,
            zip_code=zip_code,
            state=state,
            country=country,
        )
    )

    if isinstance(result, Err):
        logger.debug("address_rejected", failures=len(result.error))
        for violation in result.error:
            click.echo(f"  - {violation}", err=True)
        raise click.ClickException(f"{len(result.error)} invalid field(s)")

    valid = result.value
    for line in valid.lines:
        click.echo(str(line))
    click.echo(f"{valid.city}, {valid.state} {valid.zip_code}")
    click.echo(str(valid.country))
