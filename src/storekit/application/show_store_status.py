"""Application service: Show Store Status use case (query)."""

from __future__ import annotations

from storekit.application.dto import StoreStatusDTO
from storekit.domain.port.clock import Clock
from storekit.domain.service.store_calendar import discount_at, is_online_at


class ShowStoreStatusHandler:

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    def handle(self) -> StoreStatusDTO:
        # Single reading so the fields agree near closing time or midnight.
        now = self._clock.now()
        return StoreStatusDTO(
            online=is_online_at(now),
            discount=discount_at(now),
            checked_at=now.strftime("%Y-%m-%d %H:%M"),
        )
