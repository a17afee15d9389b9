"""Abstract payment capability."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storekit.domain.model.order import ChargeResult


class PaymentGateway(ABC):

    @abstractmethod
    async def charge(self, card_details: str, amount: float) -> ChargeResult:
        """Charge *amount* to the card. Resolves once; no retries."""
