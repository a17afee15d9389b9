"""Coupon value object and the read-only catalog that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from storekit.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Coupon:
    """A discount code with the fraction it takes off the price."""

    code: str
    discount: float

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code:
            raise ValidationError("Coupon code must be a non-empty string")
        if isinstance(self.discount, bool) or not isinstance(self.discount, (int, float)):
            raise ValidationError(
                f"Coupon discount must be a number, got {type(self.discount).__name__}"
            )
        if not 0 < self.discount < 1:
            raise ValidationError(
                f"Coupon discount must be between 0 and 1, got {self.discount}"
            )

    def apply(self, price: float) -> float:
        return price * (1 - self.discount)


class CouponCatalog:
    """Immutable collection of coupons keyed by their (case-sensitive) code."""

    def __init__(self, coupons: Iterable[Coupon]) -> None:
        self._by_code: dict[str, Coupon] = {}
        for coupon in coupons:
            if coupon.code in self._by_code:
                raise ValidationError(f"Duplicate coupon code '{coupon.code}'")
            self._by_code[coupon.code] = coupon
        if not self._by_code:
            raise ValidationError("Coupon catalog must contain at least one coupon")

    def find(self, code: str) -> Coupon | None:
        return self._by_code.get(code)

    def to_list(self) -> list[Coupon]:
        return list(self._by_code.values())

    def __iter__(self) -> Iterator[Coupon]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)
