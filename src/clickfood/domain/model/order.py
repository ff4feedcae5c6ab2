"""Order aggregate — what the customer bought and where it is now.

Delivery progress is an explicit state machine: the order only moves
when an ``OrderEvent`` is applied, and only along the transitions in
``_TRANSITIONS``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from clickfood.domain.exceptions import ValidationError
from clickfood.domain.model.item import Item
from clickfood.domain.model.payment import DEFAULT_PAYMENT_METHOD, PaymentMethod
from clickfood.domain.model.value_objects import Money


class OrderStatus(Enum):
    PREPARING = "PREPARING"
    READY = "READY"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"

    @property
    def label(self) -> str:
        return _LABELS[self]


class OrderEvent(Enum):
    FOOD_READY = "FOOD_READY"
    PICKED_UP = "PICKED_UP"
    DELIVERED = "DELIVERED"


_LABELS = {
    OrderStatus.PREPARING: "Your order is being prepared...",
    OrderStatus.READY: "Your order is ready!",
    OrderStatus.OUT_FOR_DELIVERY: "Out for delivery",
    OrderStatus.DELIVERED: "Your order has arrived! Enjoy your meal!",
}

# (current status, event) -> next status
_TRANSITIONS = {
    (OrderStatus.PREPARING, OrderEvent.FOOD_READY): OrderStatus.READY,
    (OrderStatus.READY, OrderEvent.PICKED_UP): OrderStatus.OUT_FOR_DELIVERY,
    (OrderStatus.OUT_FOR_DELIVERY, OrderEvent.DELIVERED): OrderStatus.DELIVERED,
}

_NEXT_EVENT = {status: event for (status, event) in _TRANSITIONS}


@dataclass
class Order:
    """Aggregate root for a placed order.

    Use ``Order.place()`` for new orders. ``items`` is a snapshot of the
    cart at checkout time, so later cart changes never reach the order.
    """

    id: int | None
    customer_name: str
    items: tuple[Item, ...]
    payment_method: PaymentMethod = DEFAULT_PAYMENT_METHOD
    status: OrderStatus = OrderStatus.PREPARING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def place(
        customer_name: str,
        items: list[Item] | tuple[Item, ...],
        payment_method: PaymentMethod = DEFAULT_PAYMENT_METHOD,
    ) -> Order:
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not items:
            raise ValidationError("Cart is empty")
        return Order(
            id=None,
            customer_name=customer_name.strip(),
            items=tuple(items),
            payment_method=payment_method,
        )

    # --- State transitions ----------------------------------------------------

    def apply(self, event: OrderEvent) -> None:
        """Move the order forward in response to *event*."""
        next_status = _TRANSITIONS.get((self.status, event))
        if next_status is None:
            raise ValidationError(
                f"Cannot apply {event.value} to order in {self.status.value} status"
            )
        self.status = next_status

    def advance(self) -> None:
        """Apply whichever event comes next in the normal delivery flow."""
        if self.is_delivered:
            raise ValidationError("Order already delivered")
        self.apply(_NEXT_EVENT[self.status])

    # --- Computed properties --------------------------------------------------

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED

    @property
    def total(self) -> Money:
        return Money.total_of(item.price for item in self.items)
