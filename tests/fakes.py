"""Test doubles and sample data shared by the test suite.

The in-memory repositories are already side-effect free, so tests use
them directly; what lives here is the stand-in for wall-clock time and
a small menu whose prices are easy to add up.
"""

from __future__ import annotations

from clickfood.domain.model.item import Item


class RecordingSleeper:
    """Replaces ``time.sleep``: records every requested delay, never waits."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def make_item(
    name: str = "Burger",
    price: str = "24.90",
    category: str = "Snacks",
) -> Item:
    return Item.create(name, price, description=f"{name} description", category=category)


def sample_menu() -> list[Item]:
    return [
        make_item("Burger", "24.90", "Snacks"),
        make_item("Margherita Pizza", "39.90", "Snacks"),
        make_item("Soda", "6.00", "Drinks"),
        make_item("Açaí", "14.00", "Desserts"),
    ]
