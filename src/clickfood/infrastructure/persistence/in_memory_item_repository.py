"""In-memory implementation of ItemRepository.

The catalog is fixed for the lifetime of the process, so the
repository is read-only once constructed.
"""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from clickfood.domain.model.item import Item
from clickfood.domain.repository.item_repository import ItemRepository


class InMemoryItemRepository(ItemRepository):

    def __init__(self, items: Iterable[Item]) -> None:
        self._items: list[Item] = list(items)

    def get_by_id(self, item_id: UUID) -> Item | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def get_by_name(self, name: str) -> Item | None:
        wanted = name.strip().casefold()
        for item in self._items:
            if item.name.casefold() == wanted:
                return item
        return None

    def list_all(self) -> list[Item]:
        return list(self._items)
