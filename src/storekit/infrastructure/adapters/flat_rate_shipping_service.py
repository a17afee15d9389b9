"""Shipping service with one flat quote for every known destination."""

from __future__ import annotations

from storekit.domain.model.shipping import ShippingQuote
from storekit.domain.port.shipping_service import ShippingService


class FlatRateShippingService(ShippingService):

    def __init__(
        self,
        destinations: set[str],
        quote: ShippingQuote = ShippingQuote(cost=10, estimated_days=3),
    ) -> None:
        self._destinations = {d.lower() for d in destinations}
        self._quote = quote

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        if destination.lower() not in self._destinations:
            return None
        return self._quote
