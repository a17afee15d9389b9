"""Application service: convert a price into another currency (query)."""

from __future__ import annotations

from storekit.domain.port.currency_service import CurrencyService


class GetPriceInCurrencyHandler:

    def __init__(self, currency: CurrencyService) -> None:
        self._currency = currency

    def handle(self, price: float, currency_code: str) -> float:
        rate = self._currency.get_exchange_rate(currency_code)
        return price * rate
