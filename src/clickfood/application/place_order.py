"""Application service: Place Order use case.

Turns the current cart into an Order. The cart is left untouched here;
it is only emptied once the order has been delivered and completed.
"""

from __future__ import annotations

import logging

from clickfood.application.dto import OrderDTO
from clickfood.domain.model.cart import Cart
from clickfood.domain.model.order import Order
from clickfood.domain.model.payment import DEFAULT_PAYMENT_METHOD, PaymentMethod
from clickfood.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, order_repo: OrderRepository, cart: Cart) -> None:
        self._order_repo = order_repo
        self._cart = cart

    def handle(
        self,
        customer_name: str,
        payment_method: PaymentMethod = DEFAULT_PAYMENT_METHOD,
    ) -> OrderDTO:
        order = Order.place(
            customer_name=customer_name,
            items=self._cart.items,
            payment_method=payment_method,
        )
        self._order_repo.save(order)
        logger.info(
            "Placed order #%s for %s: %d item(s), %s via %s",
            order.id, order.customer_name, len(order.items),
            order.total, payment_method.label,
        )
        return OrderDTO.from_order(order)
