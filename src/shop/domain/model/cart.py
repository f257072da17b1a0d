"""Cart: the lines a customer has picked during one session.

The cart owns its lines but not the catalog items behind them: each line
stores the item identifier and a snapshot of the unit price.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from shop.domain.exceptions import (
    ExpiredProductError,
    InsufficientStockError,
    ValidationError,
)
from shop.domain.model.capabilities import Perishable
from shop.domain.model.catalog_item import CatalogItem
from shop.domain.model.value_objects import Money, Quantity

logger = structlog.get_logger(__name__)


def _is_spoiled(item: Perishable) -> bool:
    return item.is_expirable() and item.has_expired()


@dataclass(frozen=True)
class CartLine:
    """One (item, quantity) entry with the price captured at add time."""

    item_id: str
    item_name: str
    quantity: Quantity
    unit_price: Money  # locked when the line was added

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


class Cart:
    """Ordered collection of cart lines with a running total.

    ``total`` is accumulated as lines are added, never recomputed from
    current catalog prices.  A price change after an item was added does
    not change what the customer pays for that line.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []
        self._total = Money.zero()

    def add(self, item: CatalogItem, quantity: int) -> None:
        """Add *quantity* units of *item*.

        Raises InsufficientStockError when the quantity is not a positive int or
        the item does not have that much stock, and ExpiredProductError
        when a perishable item has expired.  Stock is not touched here.
        """
        try:
            requested = Quantity(quantity)
        except ValidationError as exc:
            raise InsufficientStockError(
                f"Insufficient stock for product: {item.name} ({exc})"
            ) from exc
        if not item.is_available(requested.value):
            raise InsufficientStockError(
                f"Insufficient stock for product: {item.name} "
                f"(requested {quantity}, have {item.stock_quantity})"
            )
        if _is_spoiled(item):
            raise ExpiredProductError(
                f"Product {item.name} has expired and cannot be added to the cart"
            )

        line = CartLine(
            item_id=item.id,
            item_name=item.name,
            quantity=requested,
            unit_price=item.price,
        )
        self._lines.append(line)
        self._total = self._total + line.line_total
        logger.debug(
            "cart_line_added",
            item=item.name,
            quantity=quantity,
            unit_price=str(item.price),
            cart_total=str(self._total),
        )

    def clear(self) -> None:
        self._lines.clear()
        self._total = Money.zero()

    # --- Queries --------------------------------------------------------------

    @property
    def total(self) -> Money:
        return self._total

    def get_total(self) -> Money:
        return self._total

    def is_empty(self) -> bool:
        return not self._lines

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)
