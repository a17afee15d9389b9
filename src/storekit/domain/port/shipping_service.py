"""Abstract shipping quote capability."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storekit.domain.model.shipping import ShippingQuote


class ShippingService(ABC):

    @abstractmethod
    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """Return a quote for *destination*, or None if it cannot be shipped to."""
