"""Small arithmetic helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence


def max_of(a: float, b: float) -> float:
    """Return the larger of two values; the first one on a tie."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    if n % 15 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(values: Sequence[float]) -> float:
    """Return the arithmetic mean of `values`, or NaN when empty."""
    if not values:
        return math.nan
    return sum(values) / len(values)


def factorial(n: int) -> int | None:
    """Return `n!`, or None for negative `n`."""
    if n < 0:
        return None
    return math.factorial(n)
