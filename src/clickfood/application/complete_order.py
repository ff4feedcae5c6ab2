"""Application service: Complete Order use case.

The last step of checkout: once the order has arrived the session's
cart is emptied so the customer can start over.
"""

from __future__ import annotations

import logging

from clickfood.domain.exceptions import EntityNotFoundError, ValidationError
from clickfood.domain.model.cart import Cart
from clickfood.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CompleteOrderHandler:

    def __init__(self, order_repo: OrderRepository, cart: Cart) -> None:
        self._order_repo = order_repo
        self._cart = cart

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if not order.is_delivered:
            raise ValidationError(
                f"Cannot complete order #{order_id}: current status is "
                f"{order.status.value}, expected DELIVERED"
            )

        self._cart.clear()
        logger.info("Order #%d completed, cart cleared", order_id)
