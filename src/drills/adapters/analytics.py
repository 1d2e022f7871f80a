"""Analytics tracker that writes page views to the log."""

import logging

from drills.interfaces.analytics import Analytics

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class LoggingAnalytics(Analytics):
    """Record page views in memory and log each one at INFO."""

    def __init__(self) -> None:
        self.page_views: list[str] = []

    def track_page_view(self, path: str) -> None:
        self.page_views.append(path)
        logger.info("Page view: %s", path)
