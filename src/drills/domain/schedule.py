"""Business rules that depend on the current time.

Time is always read from an injected `Clock`, never from the system directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .value_objects import CHRISTMAS, DEFAULT_OPENING_HOURS, Holiday, OpeningHours

if TYPE_CHECKING:
    from drills.interfaces.clock import Clock


def is_online(clock: Clock, hours: OpeningHours = DEFAULT_OPENING_HOURS) -> bool:
    """Return True while the shop is open.

    The window includes the opening hour and excludes the closing hour, so with
    the default 08:00-20:00 window 19:59 is open and 20:00 is closed.
    """
    current_hour = clock.now().hour
    return hours.open_hour <= current_hour < hours.close_hour


def get_discount(clock: Clock, holiday: Holiday = CHRISTMAS) -> float:
    """Return the holiday discount on the holiday itself, otherwise 0."""
    today = clock.now()
    if (today.month, today.day) == (holiday.month, holiday.day):
        return holiday.discount
    return 0.0
