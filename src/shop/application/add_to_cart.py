"""Application service: Add To Cart use case.

Resolves item names against the catalog, then lets the customer's cart
apply its own add-time rules.
"""

from __future__ import annotations

from shop.application.dto import CartItemSpec
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.customer import Customer
from shop.domain.repository.catalog_repository import CatalogRepository


class AddToCartHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, customer: Customer, item_specs: list[CartItemSpec]) -> None:
        """Add each requested item to the customer's cart, in order.

        InsufficientStockError and ExpiredProductError propagate from the
        cart.  Lines added before a failing spec stay in the cart.
        """
        for spec in item_specs:
            item = self._catalog_repo.get_by_name(spec.item_name)
            if item is None:
                raise EntityNotFoundError(f"Item not found: '{spec.item_name}'")
            customer.add_to_cart(item, spec.quantity)
