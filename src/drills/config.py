"""Configuration utilities for DRILLS.

This module centralizes small helpers that read settings from the environment.
"""

import os

from drills.domain.errors import InvalidValueObjectError
from drills.domain.value_objects import DEFAULT_OPENING_HOURS, OpeningHours

OPEN_HOUR_ENV = "DRILLS_OPEN_HOUR"  # pragma: no mutate
CLOSE_HOUR_ENV = "DRILLS_CLOSE_HOUR"  # pragma: no mutate
BASE_CURRENCY_ENV = "DRILLS_BASE_CURRENCY"  # pragma: no mutate

DEFAULT_BASE_CURRENCY = "USD"


class InvalidSettingError(Exception):
    """Raised when an environment setting holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"{name}={value!r}: {reason}")
        self.name = name
        self.value = value


def _get_int(name: str, default: int) -> int:
    if not (raw := os.environ.get(name)):
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidSettingError(name, raw, "expected an integer") from e


def get_opening_hours() -> OpeningHours:
    """Get the shop's daily opening window from the environment.

    Reads `DRILLS_OPEN_HOUR` and `DRILLS_CLOSE_HOUR`; unset values fall back to
    08:00-20:00.

    Raises:
        InvalidSettingError: If a value is not an integer or the window is invalid.
    """
    open_hour = _get_int(OPEN_HOUR_ENV, DEFAULT_OPENING_HOURS.open_hour)
    close_hour = _get_int(CLOSE_HOUR_ENV, DEFAULT_OPENING_HOURS.close_hour)
    try:
        return OpeningHours(open_hour=open_hour, close_hour=close_hour)
    except InvalidValueObjectError as e:
        raise InvalidSettingError(
            f"{OPEN_HOUR_ENV}/{CLOSE_HOUR_ENV}", f"{open_hour}-{close_hour}", e.reason
        ) from e


def get_base_currency() -> str:
    """Get the currency prices are quoted in (`DRILLS_BASE_CURRENCY`, default USD).

    Raises:
        InvalidSettingError: If the value is not a three-letter code.
    """
    raw = os.environ.get(BASE_CURRENCY_ENV) or DEFAULT_BASE_CURRENCY
    code = raw.strip().upper()
    if len(code) != 3 or not code.isalpha():  # pylint: disable=magic-value-comparison
        raise InvalidSettingError(BASE_CURRENCY_ENV, raw, "expected a 3-letter code")
    return code
