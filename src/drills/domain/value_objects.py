"""Module including value objects used across the domain layer."""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidCouponError, InvalidValueObjectError


def is_real_number(value: object) -> bool:
    """Return True for int/float values that are not booleans or NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


@dataclass(frozen=True, slots=True)
class Coupon:
    """Discount coupon; `discount` is a fraction strictly between 0 and 1."""

    code: str
    discount: float

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code:
            raise InvalidCouponError(self.code, "code must be a non-empty string")
        if not is_real_number(self.discount) or not 0 < self.discount < 1:
            raise InvalidCouponError(self.code, "discount must be between 0 and 1")


@dataclass(frozen=True, slots=True)
class OpeningHours:
    """Daily opening window `[open_hour, close_hour)` in local hours."""

    open_hour: int
    close_hour: int

    def __post_init__(self) -> None:
        if not 0 <= self.open_hour < self.close_hour <= 24:  # pylint: disable=magic-value-comparison
            raise InvalidValueObjectError(
                "opening hours",
                f"expected 0 <= open < close <= 24, got {self.open_hour}-{self.close_hour}",
            )


# Leap year, so 02-29 counts as a calendar day.
_REFERENCE_YEAR = 2024


def _is_calendar_day(month: object, day: object) -> bool:
    if isinstance(month, bool) or isinstance(day, bool):
        return False
    if not isinstance(month, int) or not isinstance(day, int) or not 1 <= month <= 12:
        return False
    return 1 <= day <= calendar.monthrange(_REFERENCE_YEAR, month)[1]


@dataclass(frozen=True, slots=True)
class Holiday:
    """A recurring calendar day on which a fixed discount applies."""

    month: int
    day: int
    discount: float

    def __post_init__(self) -> None:
        if not _is_calendar_day(self.month, self.day):
            raise InvalidValueObjectError(
                "holiday", f"no such calendar day {self.month!s:0>2}-{self.day!s:0>2}"
            )
        if not is_real_number(self.discount) or not 0 < self.discount < 1:
            raise InvalidValueObjectError(
                "holiday", "discount must be between 0 and 1"
            )


CHRISTMAS = Holiday(month=12, day=25, discount=0.2)
DEFAULT_OPENING_HOURS = OpeningHours(open_hour=8, close_hour=20)


# --- Storefront value objects ---


@dataclass(frozen=True, slots=True)
class Order:
    """An order awaiting payment."""

    total_amount: float


@dataclass(frozen=True, slots=True)
class CreditCard:
    """Card details handed to the payment gateway."""

    number: str


@dataclass(frozen=True, slots=True)
class ShippingQuote:
    """Quote returned by a shipping provider."""

    cost: float
    estimated_days: int


class ChargeStatus(Enum):
    """Outcome of a payment charge."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ChargeResult:
    """Value object returned by a payment gateway."""

    status: ChargeStatus


@dataclass(frozen=True, slots=True)
class OrderResult:
    """Outcome of submitting an order."""

    success: bool
    error: str | None = None
