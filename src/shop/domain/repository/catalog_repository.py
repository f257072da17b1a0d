"""Abstract repository for the CatalogItem aggregate.

The catalog is the single owner of items: an identifier-to-item map.
Carts keep identifiers and come back here to resolve them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.catalog_item import CatalogItem


class CatalogRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Return the identifier the next new item should get."""

    @abstractmethod
    def get_by_id(self, item_id: str) -> CatalogItem | None:
        """Return an item by identifier, or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> CatalogItem | None:
        """Return an item by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[CatalogItem]:
        """Return every item in insertion order."""

    @abstractmethod
    def save(self, item: CatalogItem) -> None:
        """Store a new or updated item."""
