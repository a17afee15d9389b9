"""Application service: describe shipping to a destination (query)."""

from __future__ import annotations

from storekit.domain.port.shipping_service import ShippingService

SHIPPING_UNAVAILABLE = "Shipping Unavailable"


def format_cost(cost: float) -> str:
    """Whole amounts print without decimals, others with two (20 -> "20")."""
    if float(cost).is_integer():
        return str(int(cost))
    return f"{cost:.2f}"


class GetShippingInfoHandler:

    def __init__(self, shipping: ShippingService) -> None:
        self._shipping = shipping

    def handle(self, destination: str) -> str:
        quote = self._shipping.get_shipping_quote(destination)
        if quote is None:
            return SHIPPING_UNAVAILABLE
        return f"Shipping Cost: ${format_cost(quote.cost)} ({quote.estimated_days} Days)"
