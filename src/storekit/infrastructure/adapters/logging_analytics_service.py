"""Analytics service that writes page views to the log."""

from __future__ import annotations

import logging

from storekit.domain.port.analytics_service import AnalyticsService

logger = logging.getLogger(__name__)


class LoggingAnalyticsService(AnalyticsService):

    async def track_page_view(self, path: str) -> None:
        logger.info("Page view: %s", path)
