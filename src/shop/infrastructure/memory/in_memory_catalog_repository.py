"""In-memory implementation of CatalogRepository.

The catalog lives for the process lifetime only; nothing is persisted.
"""

from __future__ import annotations

from shop.domain.model.catalog_item import CatalogItem
from shop.domain.repository.catalog_repository import CatalogRepository


class InMemoryCatalogRepository(CatalogRepository):

    def __init__(self, items: list[CatalogItem] | None = None) -> None:
        self._store: dict[str, CatalogItem] = {}
        self._next_id = 1
        for item in items or []:
            self.save(item)

    # --- CatalogRepository interface ------------------------------------------

    def next_id(self) -> str:
        return str(self._next_id)

    def get_by_id(self, item_id: str) -> CatalogItem | None:
        return self._store.get(item_id)

    def get_by_name(self, name: str) -> CatalogItem | None:
        wanted = name.strip().lower()
        for item in self._store.values():
            if item.name.lower() == wanted:
                return item
        return None

    def list_all(self) -> list[CatalogItem]:
        return list(self._store.values())

    def save(self, item: CatalogItem) -> None:
        self._store[item.id] = item
        # ids from outside the counter (e.g. "sku-a") do not move it
        if item.id.isdigit():
            self._next_id = max(self._next_id, int(item.id) + 1)
