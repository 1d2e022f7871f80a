"""Static exchange rate table."""

from collections.abc import Mapping

from drills.interfaces.errors import UnknownCurrencyError
from drills.interfaces.exchange_rates import ExchangeRateProvider

# pylint: disable=too-few-public-methods

DEFAULT_RATES: dict[tuple[str, str], float] = {
    ("USD", "AUD"): 1.5,
    ("USD", "EUR"): 0.92,
    ("USD", "GBP"): 0.79,
    ("USD", "IDR"): 16000.0,
}


class StaticExchangeRates(ExchangeRateProvider):
    """Exchange rates looked up in a fixed table.

    Currency codes are case-insensitive. Converting a currency to itself is
    always 1, and the inverse of a known pair is derived from it.
    """

    def __init__(self, rates: Mapping[tuple[str, str], float] | None = None) -> None:
        source = DEFAULT_RATES if rates is None else rates
        self._rates = {(a.upper(), b.upper()): r for (a, b), r in source.items()}

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        pair = (from_currency.upper(), to_currency.upper())
        if pair[0] == pair[1]:
            return 1.0
        if pair in self._rates:
            return self._rates[pair]
        if (inverse := self._rates.get((pair[1], pair[0]))) is not None:
            return 1 / inverse
        raise UnknownCurrencyError(*pair)
