"""Domain service: Catalog filtering.

Pure functions over a sequence of items; neither one mutates its input
or raises.
"""

from __future__ import annotations

from collections.abc import Iterable

from clickfood.domain.model.item import Item


def filter_items(
    items: Iterable[Item],
    query: str = "",
    category: str | None = None,
) -> list[Item]:
    """Return the items in *category* whose name contains *query*.

    ``category=None`` means every category; an empty query matches every
    name. Matching on the name ignores case. Input order is kept.
    """
    needle = query.casefold()
    return [
        item
        for item in items
        if (category is None or item.category == category)
        and (not needle or needle in item.name.casefold())
    ]


def categories(items: Iterable[Item]) -> list[str]:
    """Distinct category names, sorted."""
    return sorted({item.category for item in items})
