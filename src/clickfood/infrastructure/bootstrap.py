"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
A ``Session`` owns the one Cart of a checkout run; use-case handlers
receive it explicitly instead of reaching for shared global state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from clickfood.domain.model.cart import Cart
from clickfood.domain.model.item import Item
from clickfood.infrastructure.persistence.in_memory_item_repository import (
    InMemoryItemRepository,
)
from clickfood.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)

# Seconds between two tracking steps.
TRACKING_INTERVAL = 4.0


def default_menu() -> list[Item]:
    """The hardcoded menu. Each call builds fresh items with fresh ids."""
    return [
        Item.create("Burger", "24.90", "Bun, beef patty, cheese and salad", "Snacks", "burger"),
        Item.create("Margherita Pizza", "39.90", "Tomato sauce, mozzarella and basil", "Snacks", "pizza"),
        Item.create("Soda", "6.00", "Chilled 350ml can", "Drinks", "soda"),
        Item.create("Açaí", "14.00", "300ml bowl with banana", "Desserts", "acai"),
    ]


def item_repository() -> InMemoryItemRepository:
    return InMemoryItemRepository(default_menu())


def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@dataclass
class Session:
    """Everything one run of the app shares: catalog, orders and the cart."""

    item_repo: InMemoryItemRepository = field(default_factory=item_repository)
    order_repo: InMemoryOrderRepository = field(default_factory=order_repository)
    cart: Cart = field(default_factory=Cart)


def new_session() -> Session:
    return Session()
