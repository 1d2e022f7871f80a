"""Errors raised by capability implementations."""


class CapabilityError(Exception):
    """Base class for errors raised by external collaborators."""


class UnknownCurrencyError(CapabilityError, LookupError):
    """Raised when no exchange rate is known for a currency pair."""

    def __init__(self, from_currency: str, to_currency: str) -> None:
        super().__init__(f"No exchange rate for {from_currency} -> {to_currency}")
        self.from_currency = from_currency
        self.to_currency = to_currency
