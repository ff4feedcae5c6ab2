"""Application service: Track Order use case.

Simulates the delivery timeline: the order steps forward one status
every ``interval`` seconds until it is delivered. The sleep function is
injected so callers (and tests) control how time passes.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from clickfood.application.dto import OrderDTO
from clickfood.domain.exceptions import EntityNotFoundError, ValidationError
from clickfood.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class TrackOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._order_repo = order_repo
        self._sleep = sleep

    def handle(
        self,
        order_id: int,
        interval: float,
        on_update: Callable[[OrderDTO], None] | None = None,
    ) -> OrderDTO:
        """Advance the order to DELIVERED, reporting every status on the way.

        *on_update* is called once with the current status and again after
        each step. An already delivered order is reported once and returned.
        """
        if interval < 0:
            raise ValidationError("Tracking interval cannot be negative")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        dto = OrderDTO.from_order(order)
        if on_update is not None:
            on_update(dto)

        while not order.is_delivered:
            self._sleep(interval)
            order.advance()
            self._order_repo.save(order)
            logger.debug("Order #%d is now %s", order_id, order.status.value)
            dto = OrderDTO.from_order(order)
            if on_update is not None:
                on_update(dto)

        return dto
