"""Item — a purchasable catalog entry.

Items are immutable, but they are entities rather than value objects:
each one gets its own generated id, so two items built from the same
fields are still two different entries in the catalog or cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from clickfood.domain.exceptions import ValidationError
from clickfood.domain.model.value_objects import Money


@dataclass(frozen=True)
class Item:

    name: str
    price: Money
    description: str = ""
    category: str = ""
    image_ref: str = ""
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Item price must be Money, got {type(self.price).__name__}"
            )

    @staticmethod
    def create(
        name: str,
        price: str | float | Money,
        description: str = "",
        category: str = "",
        image_ref: str = "",
    ) -> Item:
        """Build a new item, validating the name and coercing the price."""
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        if not isinstance(price, Money):
            price = Money.of(price)
        return Item(
            name=name.strip(),
            price=price,
            description=description,
            category=category.strip(),
            image_ref=image_ref,
        )
