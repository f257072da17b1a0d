"""CatalogItem aggregate: a sellable unit with stock and shipping metadata.

Items live in the catalog for the whole process lifetime.  Carts never
hold an item directly; they keep its ``id`` and look it up again at
checkout time.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money


@dataclass
class CatalogItem:
    """Aggregate root for a product in the catalog.

    Satisfies both the ``Shippable`` and ``Perishable`` capabilities.

    Invariants:
    - ``stock_quantity`` is never negative after a checkout commit
    - ``weight`` is never negative
    """

    id: str
    name: str
    price: Money
    stock_quantity: int
    weight: float
    perishable: bool
    expired: bool = False

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Item name is required")
        if self.stock_quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.stock_quantity}"
            )
        if self.weight < 0:
            raise ValidationError(
                f"Weight for {self.name} cannot be negative, got {self.weight}"
            )

    # --- Stock ----------------------------------------------------------------

    def is_available(self, requested_qty: int) -> bool:
        return self.stock_quantity >= requested_qty

    def decrement_stock(self, qty: int) -> None:
        """Remove *qty* units from stock.

        Only the checkout commit calls this, and only after it has
        validated availability, so the amount is not re-checked here.
        """
        self.stock_quantity -= qty

    def increment_stock(self, qty: int) -> None:
        """Administrative restock."""
        if qty <= 0:
            raise ValidationError("Restock quantity must be positive")
        self.stock_quantity += qty

    # --- Administration -------------------------------------------------------

    def set_price(self, new_price: Money) -> None:
        """Change the item price.

        Lines already in a cart keep the price they were added at.
        """
        self.price = new_price

    def mark_expired(self) -> None:
        self.expired = True

    # --- Capabilities ---------------------------------------------------------

    def is_shippable(self) -> bool:
        return self.weight > 0

    def is_expirable(self) -> bool:
        return self.perishable

    def has_expired(self) -> bool:
        return self.expired
