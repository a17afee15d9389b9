"""CLI commands for accounts."""

from __future__ import annotations

import asyncio

import click

from storekit.application.login import LoginHandler
from storekit.application.sign_up import SignUpHandler
from storekit.infrastructure.bootstrap import code_generator, email_sender


@click.command("signup")
@click.option("--email", required=True, help="Email address.")
def account_signup(email: str) -> None:
    """Sign up and receive a welcome email."""
    handler = SignUpHandler(email_sender=email_sender())
    if not asyncio.run(handler.handle(email)):
        raise click.ClickException(f"Invalid email address '{email}'")
    click.echo(f"Signed up {email}.")


@click.command("login")
@click.option("--email", required=True, help="Email address.")
def account_login(email: str) -> None:
    """Email a one-time login code."""
    handler = LoginHandler(code_generator=code_generator(), email_sender=email_sender())
    asyncio.run(handler.handle(email))
    click.echo(f"Login code sent to {email}.")
