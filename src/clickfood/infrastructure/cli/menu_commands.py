"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from clickfood.application.browse_catalog import BrowseCatalogHandler
from clickfood.infrastructure.bootstrap import item_repository


@click.command("list")
@click.option("--search", default="", help="Only items whose name contains this text.")
@click.option("--category", default=None, help="Only items in this category.")
def menu_list(search: str, category: str | None) -> None:
    """List the menu, optionally filtered."""
    handler = BrowseCatalogHandler(item_repo=item_repository())
    items = handler.handle(query=search, category=category)

    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'Name':<20} {'Category':<12} {'Price':>10}")
    click.echo("-" * 44)
    for item in items:
        click.echo(f"{item.name:<20} {item.category:<12} {item.price:>10}")


@click.command("categories")
def menu_categories() -> None:
    """List the menu categories."""
    handler = BrowseCatalogHandler(item_repo=item_repository())
    for name in handler.categories():
        click.echo(name)
