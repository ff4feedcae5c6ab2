"""Application service: Advance Order use case.

Feeds one delivery event (food ready, picked up, delivered) into the
order's state machine.
"""

from __future__ import annotations

import logging

from clickfood.application.dto import OrderDTO
from clickfood.domain.exceptions import EntityNotFoundError
from clickfood.domain.model.order import OrderEvent
from clickfood.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class AdvanceOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, event: OrderEvent) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.apply(event)
        self._order_repo.save(order)
        logger.info("Order #%d: %s -> %s", order_id, event.value, order.status.value)
        return OrderDTO.from_order(order)
