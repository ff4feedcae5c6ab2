"""Application service: Add To Cart use case."""

from __future__ import annotations

import logging

from clickfood.application.dto import CartDTO
from clickfood.domain.exceptions import EntityNotFoundError
from clickfood.domain.model.cart import Cart
from clickfood.domain.repository.item_repository import ItemRepository

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, item_repo: ItemRepository, cart: Cart) -> None:
        self._item_repo = item_repo
        self._cart = cart

    def handle(self, item_name: str) -> CartDTO:
        """Look up a menu item by name and append it to the cart."""
        item = self._item_repo.get_by_name(item_name)
        if item is None:
            raise EntityNotFoundError(f"Item not found: '{item_name}'")

        self._cart.add(item)
        logger.info("Added %s to cart (%d item(s))", item.name, self._cart.count)
        return CartDTO.from_cart(self._cart)
