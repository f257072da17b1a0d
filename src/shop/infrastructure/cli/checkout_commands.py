"""CLI command for a one-shot shopping session: fill a cart, check out."""

from __future__ import annotations

import click

from shop.application.add_to_cart import AddToCartHandler
from shop.application.checkout import CheckoutHandler
from shop.application.dto import CartItemSpec, ReceiptDTO
from shop.domain.exceptions import DomainException
from shop.domain.model.customer import Customer
from shop.domain.model.receipt import CheckoutOutcome
from shop.domain.model.value_objects import Money
from shop.infrastructure.bootstrap import catalog_repository, checkout_engine


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Laptop:1,Cheese:3' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{name}'."
            )
        specs.append(CartItemSpec(item_name=name.strip(), quantity=qty))
    return specs


def _display_receipt(dto: ReceiptDTO) -> None:
    """Render a receipt the way a till would print it."""
    if dto.outcome == CheckoutOutcome.EMPTY_CART.value:
        click.echo("Your cart is empty.")
        return
    if dto.outcome == CheckoutOutcome.REJECTED.value:
        click.echo(f"Checkout rejected: {dto.reason}")
        return

    click.echo(f"Customer:       {dto.customer_name}")
    click.echo(f"Order Subtotal: {dto.subtotal:>12}")
    click.echo(f"Shipping Cost:  {dto.shipping_cost:>12}")
    click.echo(f"Total Amount:   {dto.total:>12}")
    click.echo(f"Checkout successful! Your new balance is: {dto.balance}")
    for shipment in dto.shipments:
        click.echo(f"Shipping product: {shipment.name} ({shipment.weight} kg)")


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, help="Starting balance (e.g. 3000.00).")
@click.option("--items", default="", help="Items as 'Item:Qty,Item:Qty'.")
@click.option(
    "--shipping-cost",
    default="10.00",
    show_default=True,
    help="Flat shipping cost added to every order.",
)
def checkout(customer: str, balance: str, items: str, shipping_cost: str) -> None:
    """Fill a cart from the seeded catalog and check it out."""
    specs = _parse_items(items)
    catalog_repo = catalog_repository()

    try:
        shopper = Customer(name=customer, balance=Money.of(balance))
        engine = checkout_engine(catalog_repo, shipping_cost=Money.of(shipping_cost))
        AddToCartHandler(catalog_repo=catalog_repo).handle(shopper, specs)
        dto = CheckoutHandler(engine=engine).handle(shopper)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(dto)
