import click

from ordertaking.infrastructure.cli.check_commands import check
from ordertaking.infrastructure.cli.customer_commands import address, customer
from ordertaking.infrastructure.cli.order_commands import quote
from ordertaking.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "-v", "--verbose", is_flag=True, envvar="ORDERTAKING_VERBOSE", help="Debug log output."
)
@click.option(
    "--log-json",
    is_flag=True,
    envvar="ORDERTAKING_LOG_JSON",
    help="Structured JSON log output to stderr.",
)
def cli(verbose: bool, log_json: bool) -> None:
    """OrderTaking: validated order-taking values."""
    configure_logging(verbose=verbose, log_json=log_json)


# Register subcommands
cli.add_command(check)
cli.add_command(quote)
cli.add_command(customer)
cli.add_command(address)
