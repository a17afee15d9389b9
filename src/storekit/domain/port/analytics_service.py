"""Abstract analytics capability."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AnalyticsService(ABC):

    @abstractmethod
    async def track_page_view(self, path: str) -> None:
        """Record a single page view."""
