"""CLI commands for the input validators."""

from __future__ import annotations

import click

from storekit.domain.exceptions import DomainException
from storekit.domain.service.validators import (
    can_drive,
    is_price_in_range,
    is_valid_username,
    validate_user_input,
)
from storekit.infrastructure.bootstrap import legal_driving_ages


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


@click.command("user")
@click.option("--username", required=True, help="Username to check.")
@click.option("--age", required=True, type=int, help="Age in years.")
def validate_user(username: str, age: int) -> None:
    """Validate a sign-up username and age."""
    click.echo(validate_user_input(username, age))


@click.command("username")
@click.argument("username")
def validate_username(username: str) -> None:
    """Check that a username has an acceptable length."""
    click.echo(f"Valid: {_yes_no(is_valid_username(username))}")


@click.command("price")
@click.option("--price", required=True, type=float)
@click.option("--min", "min_price", required=True, type=float)
@click.option("--max", "max_price", required=True, type=float)
def validate_price(price: float, min_price: float, max_price: float) -> None:
    """Check that a price lies within [min, max]."""
    click.echo(f"In range: {_yes_no(is_price_in_range(price, min_price, max_price))}")


@click.command("drive")
@click.option("--age", required=True, type=int, help="Age in years.")
@click.option("--country", required=True, help="Country code, e.g. US.")
def validate_drive(age: int, country: str) -> None:
    """Check whether someone may drive in a country."""
    try:
        result = can_drive(age, country, legal_driving_ages())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(result, str):
        raise click.ClickException(result)
    click.echo(f"Can drive: {_yes_no(result)}")
