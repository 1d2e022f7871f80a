"""Hypothesis property tests for the Stack and the pure calculators.

- **Stack accounting**: after any sequence of pushes, `size()` equals the
  number of items, and popping returns them in reverse order.
- **Clear**: `clear()` always leaves an empty stack.
- **Discounts**: known codes scale the price by `1 - discount`, unknown codes
  return it untouched, and non-positive prices are rejected.
- **Ranges**: `is_price_in_range` agrees with the inclusive comparison.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from drills.domain.coupons import calculate_discount, get_coupons
from drills.domain.errors import EmptyStackError
from drills.domain.results import Invalid, Ok
from drills.domain.stack import Stack
from drills.domain.validators import is_price_in_range, is_valid_username

pytestmark = [pytest.mark.property]

positive_prices = st.floats(min_value=0.01, max_value=1e9, allow_nan=False)
known_codes = st.sampled_from([coupon.code for coupon in get_coupons()])
unknown_codes = st.text().filter(lambda c: c not in {x.code for x in get_coupons()})


@given(st.lists(st.integers()))
def test_stack_size_and_pop_order(items):
    """Pops return pushed items last-first, and size tracks every change."""
    stack: Stack[int] = Stack()
    for item in items:
        stack.push(item)
    assert stack.size() == len(items)

    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
        assert stack.size() == len(items) - len(popped)
    assert popped == list(reversed(items))

    with pytest.raises(EmptyStackError):
        stack.pop()


@given(st.lists(st.text(), min_size=1))
def test_peek_matches_last_push(items):
    """peek always shows the most recent push without consuming it."""
    stack: Stack[str] = Stack()
    for item in items:
        stack.push(item)
        assert stack.peek() == item
    assert stack.size() == len(items)


@given(st.lists(st.integers()))
def test_clear_always_empties(items):
    """clear leaves an empty stack regardless of prior size."""
    stack: Stack[int] = Stack()
    for item in items:
        stack.push(item)
    stack.clear()
    assert stack.is_empty()
    assert stack.size() == 0


@given(positive_prices, known_codes)
def test_known_code_discounts_price(price, code):
    """A known code yields price * (1 - discount)."""
    discount = next(c.discount for c in get_coupons() if c.code == code)
    assert calculate_discount(price, code) == Ok(price * (1 - discount))


@given(positive_prices, unknown_codes)
def test_unknown_code_keeps_price(price, code):
    """An unknown code returns the price unchanged."""
    assert calculate_discount(price, code) == Ok(price)


@given(st.floats(max_value=0, allow_nan=False) | st.integers(max_value=0), st.text())
def test_non_positive_price_is_invalid(price, code):
    """Zero and negative prices are always rejected."""
    result = calculate_discount(price, code)
    assert isinstance(result, Invalid)
    assert "invalid" in str(result).lower()


@given(st.integers(), st.integers(), st.integers())
def test_price_in_range_matches_comparison(price, low, high):
    """is_price_in_range is exactly the inclusive double comparison."""
    assert is_price_in_range(price, low, high) is (low <= price <= high)


@given(st.text(max_size=30))
def test_username_validity_depends_only_on_length(username):
    """Validity of a string username is decided purely by its length."""
    assert is_valid_username(username) is (5 <= len(username) <= 15)
