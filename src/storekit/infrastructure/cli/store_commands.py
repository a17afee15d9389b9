"""CLI commands for store-wide information."""

from __future__ import annotations

import asyncio

import click

from storekit.application.price_in_currency import GetPriceInCurrencyHandler
from storekit.application.render_page import RenderPageHandler
from storekit.application.shipping_info import GetShippingInfoHandler
from storekit.application.show_store_status import ShowStoreStatusHandler
from storekit.domain.exceptions import DomainException
from storekit.infrastructure.bootstrap import (
    analytics_service,
    clock,
    currency_service,
    shipping_service,
)


@click.command("status")
def store_status() -> None:
    """Show whether the store is online and today's discount."""
    dto = ShowStoreStatusHandler(clock=clock()).handle()
    click.echo(f"Checked:  {dto.checked_at}")
    click.echo(f"Online:   {'yes' if dto.online else 'no'}")
    click.echo(f"Discount: {dto.discount:.0%}")


@click.command("price")
@click.option("--amount", required=True, type=float, help="Price in USD.")
@click.option("--currency", required=True, help="Target currency code.")
def store_price(amount: float, currency: str) -> None:
    """Convert a price into another currency."""
    handler = GetPriceInCurrencyHandler(currency=currency_service())

    try:
        converted = handler.handle(amount, currency)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{converted:.2f} {currency.upper()}")


@click.command("shipping")
@click.argument("destination")
def store_shipping(destination: str) -> None:
    """Show the shipping quote for a destination."""
    handler = GetShippingInfoHandler(shipping=shipping_service())
    click.echo(handler.handle(destination))


@click.command("home")
def store_home() -> None:
    """Render the home page."""
    handler = RenderPageHandler(analytics=analytics_service())
    click.echo(asyncio.run(handler.handle()))
