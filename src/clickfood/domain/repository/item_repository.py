"""Abstract repository for catalog items.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete catalog lives in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from clickfood.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: UUID) -> Item | None:
        """Return an item by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Item | None:
        """Return an item by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Item]:
        """Return every item in the catalog, in menu order."""
