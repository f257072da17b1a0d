"""Checkout results.

Checkout returns one of these instead of printing; the CLI decides how
to render it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shop.domain.model.value_objects import Money


class CheckoutOutcome(Enum):
    EMPTY_CART = "EMPTY_CART"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class ShipmentRecord:
    name: str
    weight: float


@dataclass(frozen=True)
class CheckoutReceipt:
    """Outcome of a single checkout attempt.

    Monetary fields are ``None`` unless the checkout completed.
    ``reason`` is only set for rejections.
    """

    outcome: CheckoutOutcome
    subtotal: Money | None = None
    shipping_cost: Money | None = None
    total: Money | None = None
    balance: Money | None = None
    shipments: tuple[ShipmentRecord, ...] = ()
    reason: str | None = None

    @property
    def is_successful(self) -> bool:
        return self.outcome == CheckoutOutcome.COMPLETED

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def empty_cart() -> CheckoutReceipt:
        return CheckoutReceipt(outcome=CheckoutOutcome.EMPTY_CART)

    @staticmethod
    def rejected(reason: str) -> CheckoutReceipt:
        return CheckoutReceipt(outcome=CheckoutOutcome.REJECTED, reason=reason)

    @staticmethod
    def completed(
        subtotal: Money,
        shipping_cost: Money,
        balance: Money,
        shipments: list[ShipmentRecord],
    ) -> CheckoutReceipt:
        return CheckoutReceipt(
            outcome=CheckoutOutcome.COMPLETED,
            subtotal=subtotal,
            shipping_cost=shipping_cost,
            total=subtotal + shipping_cost,
            balance=balance,
            shipments=tuple(shipments),
        )
