"""Interface for shipping quotes."""

import abc

from drills.domain.value_objects import ShippingQuote

# pylint: disable=too-few-public-methods


class ShippingQuoteProvider(abc.ABC):
    """Contract for a shipping quote service."""

    @abc.abstractmethod
    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """Quote shipping to `destination`.

        Returns:
            The quote, or None when the destination cannot be served.
        """
