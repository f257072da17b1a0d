import click

from shop.infrastructure.cli.catalog_commands import catalog_list
from shop.infrastructure.cli.checkout_commands import checkout
from shop.infrastructure.log_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Minimum level for structured log events (written to stderr).",
)
def cli(log_level: str) -> None:
    """Shop: cart and checkout."""
    configure_logging(log_level)


@cli.group()
def catalog() -> None:
    """Inspect the catalog."""


# Register subcommands
catalog.add_command(catalog_list)
cli.add_command(checkout)
