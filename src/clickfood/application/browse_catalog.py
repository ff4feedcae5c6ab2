"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

import logging

from clickfood.application.dto import ItemDTO
from clickfood.domain.repository.item_repository import ItemRepository
from clickfood.domain.service.catalog_filter import categories, filter_items

logger = logging.getLogger(__name__)


class BrowseCatalogHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, query: str = "", category: str | None = None) -> list[ItemDTO]:
        """Return the menu entries matching *query* within *category*."""
        matches = filter_items(self._item_repo.list_all(), query=query, category=category)
        logger.debug(
            "Catalog filter query=%r category=%r matched %d item(s)",
            query, category, len(matches),
        )
        return [ItemDTO.from_item(item) for item in matches]

    def categories(self) -> list[str]:
        return categories(self._item_repo.list_all())
