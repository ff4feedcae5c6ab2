"""CLI commands for payment options."""

from __future__ import annotations

import click

from clickfood.domain.model.payment import DEFAULT_PAYMENT_METHOD, PaymentMethod


@click.command("methods")
def payment_methods() -> None:
    """List the accepted payment methods."""
    for method in PaymentMethod:
        marker = " (default)" if method is DEFAULT_PAYMENT_METHOD else ""
        click.echo(f"{method.name.lower():<12} {method.label}{marker}")
