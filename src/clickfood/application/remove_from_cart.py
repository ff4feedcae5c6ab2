"""Application service: Remove From Cart use case."""

from __future__ import annotations

import logging
from uuid import UUID

from clickfood.application.dto import CartDTO
from clickfood.domain.model.cart import Cart

logger = logging.getLogger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, item_id: UUID) -> CartDTO:
        """Drop every entry of the item from the cart; absent ids are ignored."""
        removed = self._cart.remove(item_id)
        logger.info("Removed %d entr(ies) of item %s from cart", len(removed), item_id)
        return CartDTO.from_cart(self._cart)
