"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (item name + quantity)."""

    item_name: str
    quantity: int


@dataclass(frozen=True)
class CatalogItemDTO:
    """Output: a catalog item as displayed to the user."""

    id: str
    name: str
    price: str  # formatted, e.g. "$15.00"
    stock_quantity: int
    weight: float
    perishable: bool
    expired: bool


@dataclass(frozen=True)
class ShipmentDTO:
    name: str
    weight: float


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: the result of a checkout attempt.

    Money fields are empty strings unless ``outcome`` is COMPLETED.
    """

    customer_name: str
    outcome: str
    subtotal: str
    shipping_cost: str
    total: str
    balance: str
    shipments: list[ShipmentDTO]
    reason: str | None = None
