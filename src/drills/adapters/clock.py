"""Clocks for DRILLS."""

from datetime import datetime

from drills.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Clock backed by the host's local wall-clock time."""

    def now(self) -> datetime:
        """Return the current local time (naive)."""
        return datetime.now()


class FixedClock(Clock):
    """Clock frozen at a given instant until moved with `set`.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    @classmethod
    def at(cls, text: str) -> "FixedClock":
        """Build a clock from an ISO-like string such as ``"2024-07-07 08:00"``."""
        return cls(datetime.fromisoformat(text))

    def set(self, instant: datetime) -> None:
        """Move the clock to `instant`."""
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
