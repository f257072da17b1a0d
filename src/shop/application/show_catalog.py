"""Application service: Show Catalog query."""

from __future__ import annotations

from shop.application.dto import CatalogItemDTO
from shop.domain.repository.catalog_repository import CatalogRepository


class ShowCatalogHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self) -> list[CatalogItemDTO]:
        return [
            CatalogItemDTO(
                id=item.id,
                name=item.name,
                price=str(item.price),
                stock_quantity=item.stock_quantity,
                weight=item.weight,
                perishable=item.perishable,
                expired=item.expired,
            )
            for item in self._catalog_repo.list_all()
        ]
