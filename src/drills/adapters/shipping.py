"""Shipping quotes from an in-memory destination table."""

from collections.abc import Mapping

from drills.domain.value_objects import ShippingQuote
from drills.interfaces.shipping import ShippingQuoteProvider

# pylint: disable=too-few-public-methods


class TableShippingQuotes(ShippingQuoteProvider):
    """Quote shipping from a destination -> quote table (case-insensitive)."""

    def __init__(self, quotes: Mapping[str, ShippingQuote] | None = None) -> None:
        self._quotes = {k.lower(): v for k, v in (quotes or {}).items()}

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        return self._quotes.get(destination.lower())
