"""Interface for analytics tracking."""

import abc

# pylint: disable=too-few-public-methods


class Analytics(abc.ABC):
    """Contract for a fire-and-forget analytics tracker."""

    @abc.abstractmethod
    def track_page_view(self, path: str) -> None:
        """Record a view of the page at `path`."""
