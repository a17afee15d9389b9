"""Application service: render the home page and record the visit."""

from __future__ import annotations

from storekit.domain.port.analytics_service import AnalyticsService

HOME_PATH = "/home"


class RenderPageHandler:

    def __init__(self, analytics: AnalyticsService) -> None:
        self._analytics = analytics

    async def handle(self) -> str:
        await self._analytics.track_page_view(HOME_PATH)
        return "<div>content</div>"
