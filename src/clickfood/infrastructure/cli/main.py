import logging

import click

from clickfood.infrastructure.cli.checkout_commands import checkout
from clickfood.infrastructure.cli.menu_commands import menu_categories, menu_list
from clickfood.infrastructure.cli.payment_commands import payment_methods


@click.group(context_settings={"auto_envvar_prefix": "CLICKFOOD"})
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every step.")
def cli(verbose: bool) -> None:
    """ClickFood: order food from the menu."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@cli.group()
def menu() -> None:
    """Browse the menu."""


@cli.group()
def payment() -> None:
    """Payment options."""


# Register subcommands
menu.add_command(menu_categories)
menu.add_command(menu_list)
payment.add_command(payment_methods)
cli.add_command(checkout)
