"""CLI commands for orders."""

from __future__ import annotations

import asyncio

import click

from storekit.application.submit_order import SubmitOrderHandler
from storekit.domain.model.order import Order
from storekit.infrastructure.bootstrap import payment_gateway


@click.command("submit")
@click.option("--amount", required=True, type=float, help="Order total.")
@click.option("--card", required=True, help="Credit card details.")
def order_submit(amount: float, card: str) -> None:
    """Charge the card and submit the order."""
    handler = SubmitOrderHandler(payment=payment_gateway())
    result = asyncio.run(handler.handle(Order(total_amount=amount), card))

    if not result.success:
        raise click.ClickException(f"Order failed: {result.error}")
    click.echo(f"Order of ${amount:.2f} submitted.")
