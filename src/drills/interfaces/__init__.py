"""Capability interfaces for the external collaborators used by DRILLS."""

from .analytics import Analytics
from .clock import Clock
from .code_generator import CodeGenerator
from .email import EmailSender
from .exchange_rates import ExchangeRateProvider
from .payment import PaymentGateway
from .shipping import ShippingQuoteProvider

__all__ = [
    "Analytics",
    "Clock",
    "CodeGenerator",
    "EmailSender",
    "ExchangeRateProvider",
    "PaymentGateway",
    "ShippingQuoteProvider",
]
