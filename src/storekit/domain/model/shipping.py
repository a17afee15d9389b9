"""Shipping quote returned by the shipping capability."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ShippingQuote:

    cost: float
    estimated_days: int
