"""CLI commands for the catalog."""

from __future__ import annotations

import click

from shop.application.show_catalog import ShowCatalogHandler
from shop.infrastructure.bootstrap import catalog_repository


def _flags(perishable: bool, expired: bool) -> str:
    if not perishable:
        return ""
    return "perishable, expired" if expired else "perishable"


@click.command("list")
def catalog_list() -> None:
    """List all items in the catalog."""
    handler = ShowCatalogHandler(catalog_repo=catalog_repository())
    items = handler.handle()

    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'ID':<4} {'Name':<16} {'Price':>10} {'Stock':>7} {'Weight':>8}  Flags")
    click.echo("-" * 60)
    for item in items:
        click.echo(
            f"{item.id:<4} {item.name:<16} {item.price:>10} {item.stock_quantity:>7} "
            f"{item.weight:>8}  {_flags(item.perishable, item.expired)}"
        )
