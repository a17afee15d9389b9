"""Abstract currency conversion capability."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CurrencyService(ABC):

    @abstractmethod
    def get_exchange_rate(self, currency: str) -> float:
        """Return how many units of *currency* one base unit buys."""
