"""Application services: administrative catalog changes.

Price updates, restocks and expiry marking all follow the same shape:
look the item up by name, mutate the aggregate, save it.
"""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.catalog_item import CatalogItem
from shop.domain.model.value_objects import Money
from shop.domain.repository.catalog_repository import CatalogRepository


def _get_item(catalog_repo: CatalogRepository, item_name: str) -> CatalogItem:
    item = catalog_repo.get_by_name(item_name)
    if item is None:
        raise EntityNotFoundError(f"Item not found: '{item_name}'")
    return item


class UpdatePriceHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, item_name: str, new_price: str) -> None:
        """Update an item's price.

        This does NOT affect lines already in a cart; they captured a
        price snapshot when they were added.
        """
        item = _get_item(self._catalog_repo, item_name)
        item.set_price(Money.of(new_price))
        self._catalog_repo.save(item)


class RestockItemHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, item_name: str, quantity: int) -> int:
        """Add stock and return the new stock level."""
        item = _get_item(self._catalog_repo, item_name)
        item.increment_stock(quantity)
        self._catalog_repo.save(item)
        return item.stock_quantity


class MarkExpiredHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, item_name: str) -> None:
        item = _get_item(self._catalog_repo, item_name)
        item.mark_expired()
        self._catalog_repo.save(item)
