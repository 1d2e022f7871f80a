"""Input validators for usernames, ages, prices, countries, and emails."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .results import Invalid, Ok
from .value_objects import is_real_number

if TYPE_CHECKING:
    from .results import Result

# Account sign-up bounds
USER_INPUT_USERNAME_MIN = 3
USER_INPUT_USERNAME_MAX = 255
USER_INPUT_AGE_MIN = 18
USER_INPUT_AGE_MAX = 100

# Display-name bounds used by is_valid_username
USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 15

MINIMUM_DRIVING_AGE: dict[str, int] = {"US": 16, "UK": 17}

VALIDATION_SUCCESS = "Validation successful"
INVALID_USERNAME = "Invalid username"
INVALID_AGE = "Invalid age"
INVALID_COUNTRY_CODE = "Invalid country code"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _length_between(value: object, min_length: int, max_length: int) -> bool:
    return isinstance(value, str) and min_length <= len(value) <= max_length


def validate_user_input(username: object, age: object) -> Result[str]:
    """Validate sign-up input.

    The username must be a string of 3 to 255 characters and the age a number
    from 18 to 100, both bounds inclusive. All violations are reported, with
    the username first.

    Returns:
        `Ok("Validation successful")` or `Invalid` listing each violation.
    """
    reasons: list[str] = []
    if not _length_between(username, USER_INPUT_USERNAME_MIN, USER_INPUT_USERNAME_MAX):
        reasons.append(INVALID_USERNAME)
    if not is_real_number(age) or not USER_INPUT_AGE_MIN <= age <= USER_INPUT_AGE_MAX:  # type: ignore[operator]
        reasons.append(INVALID_AGE)

    if reasons:
        return Invalid.of(*reasons)
    return Ok(VALIDATION_SUCCESS)


def is_price_in_range(price: object, min_price: object, max_price: object) -> bool:
    """Return True if `price` lies in `[min_price, max_price]`.

    Non-numeric arguments give False.
    """
    if not all(is_real_number(v) for v in (price, min_price, max_price)):
        return False
    return min_price <= price <= max_price  # type: ignore[operator]


def is_valid_username(
    username: object,
    min_length: int = USERNAME_MIN_LENGTH,
    max_length: int = USERNAME_MAX_LENGTH,
) -> bool:
    """Return True if `username` is a string with an accepted length.

    Non-string values (None, numbers, ...) are simply not valid usernames.
    """
    return _length_between(username, min_length, max_length)


def can_drive(age: object, country_code: object) -> Result[bool]:
    """Check whether someone of `age` may drive in `country_code`.

    Returns:
        `Ok(True)` / `Ok(False)` for a known country and numeric age, or
        `Invalid` for an unknown country code or a non-numeric age.
    """
    if not isinstance(country_code, str) or country_code not in MINIMUM_DRIVING_AGE:
        return Invalid(INVALID_COUNTRY_CODE)
    if not is_real_number(age):
        return Invalid(INVALID_AGE)
    return Ok(age >= MINIMUM_DRIVING_AGE[country_code])  # type: ignore[operator]


def is_valid_email(email: object) -> bool:
    """Return True if `email` looks like `local@domain.tld`."""
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None
