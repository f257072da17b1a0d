"""Customer aggregate, owning a balance and exactly one cart."""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.exceptions import ValidationError
from shop.domain.model.cart import Cart
from shop.domain.model.catalog_item import CatalogItem
from shop.domain.model.value_objects import Money


@dataclass
class Customer:
    """The shopper for one session.

    Invariant: ``balance`` is never negative.  ``Money`` already refuses
    negative amounts, so an over-debit fails loudly instead of going below
    zero.
    """

    name: str
    balance: Money
    cart: Cart = field(default_factory=Cart)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")
        self.name = self.name.strip()

    def add_to_cart(self, item: CatalogItem, quantity: int) -> None:
        """Add to this customer's cart; add-time errors propagate."""
        self.cart.add(item, quantity)

    def can_afford(self, amount: Money) -> bool:
        return amount <= self.balance

    def debit(self, amount: Money) -> None:
        if not self.can_afford(amount):
            raise ValidationError(
                f"Cannot debit {amount} from {self.name}, balance is {self.balance}"
            )
        self.balance = self.balance - amount
