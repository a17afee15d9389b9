"""CLI commands for coupons and discounts."""

from __future__ import annotations

import click

from storekit.domain.exceptions import DomainException
from storekit.domain.service.discount import calculate_discount
from storekit.infrastructure.bootstrap import coupon_catalog


@click.command("list")
def coupon_list() -> None:
    """List the available coupon codes."""
    try:
        catalog = coupon_catalog()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'Code':<12} {'Discount':>8}")
    click.echo("-" * 21)
    for coupon in catalog:
        click.echo(f"{coupon.code:<12} {coupon.discount:>8.0%}")


@click.command("apply")
@click.option("--price", required=True, type=float, help="Price before discount.")
@click.option("--code", required=True, help="Coupon code (case-sensitive).")
def coupon_apply(price: float, code: str) -> None:
    """Apply a coupon code to a price."""
    try:
        result = calculate_discount(price, code, coupon_catalog())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(result, str):
        raise click.ClickException(result)
    click.echo(f"Discounted price: ${result:.2f}")
