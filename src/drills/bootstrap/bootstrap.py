"""Bind adapters to the storefront and schedule operations."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from drills import config
from drills.adapters.analytics import LoggingAnalytics
from drills.adapters.clock import SystemClock
from drills.adapters.code_generators import RandomCodeGenerator
from drills.adapters.email import LoggingEmailSender
from drills.adapters.exchange_rates import StaticExchangeRates
from drills.adapters.payment import SimulatedPaymentGateway
from drills.adapters.shipping import TableShippingQuotes
from drills.domain import schedule
from drills.interfaces import (
    Analytics,
    Clock,
    CodeGenerator,
    EmailSender,
    ExchangeRateProvider,
    PaymentGateway,
    ShippingQuoteProvider,
)
from drills.service_layer import storefront

logger = logging.getLogger(__name__)

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class AppContainer:
    """Operations with their collaborators already bound.

    Each attribute accepts only the operation's own arguments; the adapters
    named in `deps` are supplied automatically.
    """

    deps: Mapping[str, object]
    get_price_in_currency: Callable[..., float]
    get_shipping_info: Callable[..., str]
    render_page: Callable[..., Awaitable[str]]
    submit_order: Callable[..., Awaitable[Any]]
    sign_up: Callable[..., Awaitable[bool]]
    login: Callable[..., Awaitable[None]]
    is_online: Callable[..., bool]
    get_discount: Callable[..., float]


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies named in the handler's signature as keywords."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)


def bootstrap(  # pylint: disable=too-many-arguments
    *,
    clock: Clock | None = None,
    exchange_rates: ExchangeRateProvider | None = None,
    shipping: ShippingQuoteProvider | None = None,
    analytics: Analytics | None = None,
    payment: PaymentGateway | None = None,
    mailer: EmailSender | None = None,
    security: CodeGenerator | None = None,
    base_currency: str | None = None,
) -> AppContainer:
    """Build the application, using default adapters for anything not given.

    Raises:
        InvalidSettingError: If the environment configuration is unusable.
    """
    dependencies: dict[str, object] = {
        "clock": clock or SystemClock(),
        "exchange_rates": exchange_rates or StaticExchangeRates(),
        "shipping": shipping or TableShippingQuotes(),
        "analytics": analytics or LoggingAnalytics(),
        "payment": payment or SimulatedPaymentGateway(),
        "mailer": mailer or LoggingEmailSender(),
        "security": security or RandomCodeGenerator(),
        "base_currency": base_currency or config.get_base_currency(),
        "hours": config.get_opening_hours(),
    }
    logger.debug(
        "Bootstrapped with %s",
        {name: type(dep).__name__ for name, dep in dependencies.items()},
    )

    def bind(handler: Callable) -> Callable:
        return inject_dependencies(handler, dependencies)

    return AppContainer(
        deps=dependencies,
        get_price_in_currency=bind(storefront.get_price_in_currency),
        get_shipping_info=bind(storefront.get_shipping_info),
        render_page=bind(storefront.render_page),
        submit_order=bind(storefront.submit_order),
        sign_up=bind(storefront.sign_up),
        login=bind(storefront.login),
        is_online=bind(schedule.is_online),
        get_discount=bind(schedule.get_discount),
    )
