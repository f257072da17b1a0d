"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shop.application.add_catalog_item import AddCatalogItemHandler
from shop.domain.model.value_objects import Money
from shop.domain.service.checkout_engine import FLAT_SHIPPING_COST, CheckoutEngine
from shop.domain.service.shipping_dispatcher import ShippingDispatcher
from shop.infrastructure.memory.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)

# (name, price, quantity, weight in kg, perishable)
SEED_CATALOG = [
    ("Laptop", "1000", 10, 2.5, False),
    ("Tablet", "500", 20, 0.8, False),
    ("Cheese", "5.2", 100, 0.1, True),
]


def catalog_repository() -> InMemoryCatalogRepository:
    """Return a fresh catalog loaded with the seed items."""
    repo = InMemoryCatalogRepository()
    handler = AddCatalogItemHandler(catalog_repo=repo)
    for name, price, quantity, weight, perishable in SEED_CATALOG:
        handler.handle(
            name=name,
            price=price,
            quantity=quantity,
            weight=weight,
            perishable=perishable,
        )
    return repo


def checkout_engine(
    catalog_repo: InMemoryCatalogRepository,
    shipping_cost: Money = FLAT_SHIPPING_COST,
) -> CheckoutEngine:
    return CheckoutEngine(
        catalog_repo=catalog_repo,
        dispatcher=ShippingDispatcher(),
        shipping_cost=shipping_cost,
    )
