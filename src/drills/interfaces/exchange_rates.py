"""Interface for currency exchange rates."""

import abc

# pylint: disable=too-few-public-methods


class ExchangeRateProvider(abc.ABC):
    """Contract for a currency exchange rate source."""

    @abc.abstractmethod
    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Return how many units of `to_currency` one `from_currency` buys.

        Raises:
            UnknownCurrencyError: If the pair is not supported.
        """
