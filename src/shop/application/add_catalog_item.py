"""Application service: Add Catalog Item use case."""

from __future__ import annotations

from shop.domain.exceptions import ValidationError
from shop.domain.model.catalog_item import CatalogItem
from shop.domain.model.value_objects import Money
from shop.domain.repository.catalog_repository import CatalogRepository


class AddCatalogItemHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        name: str,
        price: str | float | int,
        quantity: int,
        weight: float,
        perishable: bool,
        expired: bool = False,
    ) -> CatalogItem:
        """Add a new item to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Item name is required")

        existing = self._catalog_repo.get_by_name(name)
        if existing is not None:
            raise ValidationError(f"Item '{name}' already exists")

        item = CatalogItem(
            id=self._catalog_repo.next_id(),
            name=name.strip(),
            price=Money.of(price),
            stock_quantity=quantity,
            weight=weight,
            perishable=perishable,
            expired=expired,
        )
        self._catalog_repo.save(item)
        return item
