"""Domain service: time-dependent store rules.

Both rules read the current local time from a Clock port. The ``*_at``
variants take an explicit datetime so one reading can drive several rules.
"""

from __future__ import annotations

from datetime import datetime

from storekit.domain.port.clock import Clock, SystemClock

OPENING_HOUR = 8
CLOSING_HOUR = 20  # exclusive

HOLIDAY_MONTH = 12
HOLIDAY_DAY = 25
HOLIDAY_DISCOUNT = 0.2


def is_online_at(now: datetime) -> bool:
    return OPENING_HOUR <= now.hour < CLOSING_HOUR


def discount_at(now: datetime) -> float:
    if now.month == HOLIDAY_MONTH and now.day == HOLIDAY_DAY:
        return HOLIDAY_DISCOUNT
    return 0


def is_online(clock: Clock | None = None) -> bool:
    """True while the store is open: from 08:00 up to, not including, 20:00."""
    return is_online_at((clock or SystemClock()).now())


def get_discount(clock: Clock | None = None) -> float:
    """Holiday discount: 0.2 for the whole of December 25th, otherwise 0."""
    return discount_at((clock or SystemClock()).now())
