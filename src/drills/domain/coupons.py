"""Coupon catalog and discount calculation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .results import Invalid, Ok
from .value_objects import Coupon, is_real_number

if TYPE_CHECKING:
    from .results import Result

INVALID_PRICE = "Invalid price"
INVALID_DISCOUNT_CODE = "Invalid discount code"

_CATALOG: tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)


def get_coupons() -> tuple[Coupon, ...]:
    """Return the fixed coupon catalog, in catalog order."""
    return _CATALOG


def find_coupon(code: str) -> Coupon | None:
    """Return the coupon whose code matches `code` exactly, or None."""
    return next((coupon for coupon in _CATALOG if coupon.code == code), None)


def calculate_discount(price: object, code: object) -> Result[float]:
    """Apply the discount identified by `code` to `price`.

    Unknown codes are ignored and the price is returned unchanged.

    Args:
        price: Positive price to discount.
        code: Coupon code from the catalog.

    Returns:
        `Ok(discounted_price)`, or `Invalid` when `price` is not a positive
        number or `code` is not a string.
    """
    if not is_real_number(price) or price <= 0:  # type: ignore[operator]
        return Invalid(INVALID_PRICE)
    if not isinstance(code, str):
        return Invalid(INVALID_DISCOUNT_CODE)

    coupon = find_coupon(code)
    if coupon is None:
        return Ok(price)
    return Ok(price * (1 - coupon.discount))  # type: ignore[operator]
