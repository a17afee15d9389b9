"""Domain service: coupon discounts.

Bad input is reported as a status string rather than raised, so callers
must check the type of the result before using it as a price.
"""

from __future__ import annotations

import math
from typing import Iterable

from storekit.domain.model.coupon import Coupon, CouponCatalog

INVALID_PRICE = "Invalid price"
INVALID_CODE = "Invalid discount code"

DEFAULT_COUPONS: tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)


def get_coupons() -> list[Coupon]:
    """Return the built-in coupon catalog as a fresh list."""
    return list(DEFAULT_COUPONS)


def is_number(value: object) -> bool:
    """True for finite ints and floats, but not for bools."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def calculate_discount(
    price: object,
    code: object,
    coupons: CouponCatalog | Iterable[Coupon] | None = None,
) -> float | str:
    """Apply the coupon named by *code* to *price*.

    Returns an "invalid" status string for a non-positive or non-numeric
    price, or a non-string code. An unknown code leaves the price unchanged.
    """
    if not is_number(price) or price <= 0:  # type: ignore[operator]
        return INVALID_PRICE
    if not isinstance(code, str):
        return INVALID_CODE

    if not isinstance(coupons, CouponCatalog):
        coupons = CouponCatalog(DEFAULT_COUPONS if coupons is None else coupons)

    coupon = coupons.find(code)
    if coupon is None:
        return price  # type: ignore[return-value]
    return coupon.apply(price)  # type: ignore[arg-type]
