import logging

import click

from storekit.infrastructure.cli.account_commands import account_login, account_signup
from storekit.infrastructure.cli.coupon_commands import coupon_apply, coupon_list
from storekit.infrastructure.cli.order_commands import order_submit
from storekit.infrastructure.cli.stack_commands import stack_reverse
from storekit.infrastructure.cli.store_commands import (
    store_home,
    store_price,
    store_shipping,
    store_status,
)
from storekit.infrastructure.cli.validate_commands import (
    validate_drive,
    validate_price,
    validate_user,
    validate_username,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """storekit — coupons, validators and store helpers"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def coupon() -> None:
    """Coupons and discounts."""


@cli.group()
def validate() -> None:
    """Input validators."""


@cli.group()
def store() -> None:
    """Store status, prices and shipping."""


@cli.group()
def order() -> None:
    """Submit orders."""


@cli.group()
def account() -> None:
    """Sign up and log in."""


@cli.group()
def stack() -> None:
    """LIFO stack."""


# Register subcommands
coupon.add_command(coupon_apply)
coupon.add_command(coupon_list)
validate.add_command(validate_drive)
validate.add_command(validate_price)
validate.add_command(validate_user)
validate.add_command(validate_username)
store.add_command(store_home)
store.add_command(store_price)
store.add_command(store_shipping)
store.add_command(store_status)
order.add_command(order_submit)
account.add_command(account_login)
account.add_command(account_signup)
stack.add_command(stack_reverse)
