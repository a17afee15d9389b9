"""Currency service backed by a fixed rate table."""

from __future__ import annotations

from storekit.domain.exceptions import EntityNotFoundError
from storekit.domain.port.currency_service import CurrencyService

DEFAULT_RATES = {"USD": 1.0, "AUD": 1.5, "EUR": 0.9, "GBP": 0.8}


class FixedRateCurrencyService(CurrencyService):

    def __init__(self, rates: dict[str, float] | None = None) -> None:
        self._rates = dict(DEFAULT_RATES if rates is None else rates)

    def get_exchange_rate(self, currency: str) -> float:
        try:
            return self._rates[currency.upper()]
        except KeyError:
            raise EntityNotFoundError(f"Unknown currency '{currency}'") from None
