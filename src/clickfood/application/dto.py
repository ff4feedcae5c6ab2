"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from clickfood.domain.model.cart import Cart
from clickfood.domain.model.item import Item
from clickfood.domain.model.order import Order


@dataclass(frozen=True)
class ItemDTO:
    """Output: a catalog entry as displayed to the user."""

    id: str
    name: str
    description: str
    category: str
    price: str  # formatted, e.g. "R$ 24.90"
    image_ref: str

    @staticmethod
    def from_item(item: Item) -> ItemDTO:
        return ItemDTO(
            id=str(item.id),
            name=item.name,
            description=item.description,
            category=item.category,
            price=str(item.price),
            image_ref=item.image_ref,
        )


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart contents plus badge count and total."""

    items: list[ItemDTO]
    count: int
    total: str

    @staticmethod
    def from_cart(cart: Cart) -> CartDTO:
        return CartDTO(
            items=[ItemDTO.from_item(item) for item in cart.items],
            count=cart.count,
            total=str(cart.total()),
        )


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order and its current status."""

    id: int
    customer_name: str
    payment_method: str
    status: str
    status_label: str
    items: list[ItemDTO]
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer_name,
            payment_method=order.payment_method.label,
            status=order.status.value,
            status_label=order.status.label,
            items=[ItemDTO.from_item(item) for item in order.items],
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
