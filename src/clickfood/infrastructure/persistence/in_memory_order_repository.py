"""In-memory implementation of OrderRepository.

Orders only live as long as the session that placed them.
"""

from __future__ import annotations

from clickfood.domain.model.order import Order
from clickfood.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}

    def next_id(self) -> int:
        if not self._store:
            return 1
        return max(self._store) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._store[order.id] = order
