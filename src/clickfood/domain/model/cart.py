"""Cart — the customer's current selection pending checkout.

A Cart belongs to one checkout session and is handed to every use case
that needs it; there is no module-level cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from clickfood.domain.model.item import Item
from clickfood.domain.model.value_objects import Money


@dataclass
class Cart:
    """Ordered list of item references.

    Invariants:
    - the same item may appear more than once (one entry per ``add``)
    - ``total()`` is always the sum of entry prices, never negative
    """

    items: list[Item] = field(default_factory=list)

    def add(self, item: Item) -> None:
        self.items.append(item)

    def remove(self, item_id: UUID) -> list[Item]:
        """Remove every entry for *item_id* and return what was removed.

        Removing an id that is not in the cart does nothing.
        """
        removed = [item for item in self.items if item.id == item_id]
        self.items[:] = [item for item in self.items if item.id != item_id]
        return removed

    def total(self) -> Money:
        return Money.total_of(item.price for item in self.items)

    def clear(self) -> None:
        self.items.clear()

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items
