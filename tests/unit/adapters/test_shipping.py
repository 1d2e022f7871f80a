"""Unit tests for TableShippingQuotes."""

from drills.adapters.shipping import TableShippingQuotes
from drills.domain.value_objects import ShippingQuote


def test_known_destination_is_quoted():
    """A destination in the table returns its quote, case-insensitively."""
    quote = ShippingQuote(cost=14000, estimated_days=2)
    provider = TableShippingQuotes({"Bandung": quote})
    assert provider.get_shipping_quote("bandung") == quote


def test_unknown_destination_is_none():
    """A destination not in the table has no quote."""
    assert TableShippingQuotes().get_shipping_quote("atlantis") is None
