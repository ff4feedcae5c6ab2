"""CLI command that walks one session from signup to delivery."""

from __future__ import annotations

import click

from clickfood.application.add_to_cart import AddToCartHandler
from clickfood.application.complete_order import CompleteOrderHandler
from clickfood.application.dto import CartDTO, OrderDTO
from clickfood.application.place_order import PlaceOrderHandler
from clickfood.application.register_customer import RegisterCustomerHandler
from clickfood.application.show_cart import ShowCartHandler
from clickfood.application.track_order import TrackOrderHandler
from clickfood.domain.exceptions import DomainException
from clickfood.domain.model.payment import PaymentMethod
from clickfood.infrastructure.bootstrap import TRACKING_INTERVAL, new_session


def _parse_items(raw: str) -> list[tuple[str, int]]:
    """Parse 'Burger:2,Soda' into [("Burger", 2), ("Soda", 1)]."""
    specs: list[tuple[str, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" in pair:
            name, qty_str = pair.rsplit(":", 1)
            try:
                qty = int(qty_str)
            except ValueError:
                raise click.BadParameter(
                    f"Invalid quantity '{qty_str}' for item '{name}'."
                )
        else:
            name, qty = pair, 1
        if qty <= 0:
            raise click.BadParameter(f"Quantity for item '{name}' must be positive.")
        specs.append((name.strip(), qty))
    if not specs:
        raise click.BadParameter("At least one item is required.")
    return specs


def _display_cart(dto: CartDTO) -> None:
    click.echo(f"Cart ({dto.count} items):")
    click.echo(f"  {'Item':<20} {'Price':>10}")
    click.echo(f"  {'-'*31}")
    for item in dto.items:
        click.echo(f"  {item.name:<20} {item.price:>10}")
    click.echo(f"  {'-'*31}")
    click.echo(f"  {'Total':<20} {dto.total:>10}")


def _display_status(dto: OrderDTO) -> None:
    click.echo(f"[{dto.status}] {dto.status_label}")


@click.command("checkout")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--password", required=True, help="Account password.")
@click.option("--items", required=True, help="Items as 'Item:Qty,Item' (Qty defaults to 1).")
@click.option("--payment", "payment_name", default="credit_card", show_default=True, help="Payment method.")
@click.option("--interval", default=TRACKING_INTERVAL, show_default=True, type=click.FloatRange(min=0), help="Seconds between status updates.")
@click.option("--track/--no-track", default=True, help="Follow the order until it arrives.")
def checkout(
    name: str,
    email: str,
    password: str,
    items: str,
    payment_name: str,
    interval: float,
    track: bool,
) -> None:
    """Sign up, fill the cart, pay and follow the order."""
    specs = _parse_items(items)
    session = new_session()

    try:
        customer = RegisterCustomerHandler().handle(name, email, password)
        method = PaymentMethod.parse(payment_name)

        add = AddToCartHandler(item_repo=session.item_repo, cart=session.cart)
        for item_name, qty in specs:
            for _ in range(qty):
                add.handle(item_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Welcome, {customer.name}! Signup complete.")
    click.echo()
    _display_cart(ShowCartHandler(cart=session.cart).handle())
    click.echo()

    try:
        order = PlaceOrderHandler(
            order_repo=session.order_repo, cart=session.cart
        ).handle(customer_name=customer.name, payment_method=method)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order.id} placed  (payment={order.payment_method}, total={order.total})")

    if not track:
        _display_status(order)
        return

    try:
        TrackOrderHandler(order_repo=session.order_repo).handle(
            order.id, interval=interval, on_update=_display_status
        )
        CompleteOrderHandler(
            order_repo=session.order_repo, cart=session.cart
        ).handle(order.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    cart = ShowCartHandler(cart=session.cart).handle()
    click.echo(f"Order #{order.id} complete. Cart cleared ({cart.count} items).")
