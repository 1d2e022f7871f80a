"""Storefront operations built on injected collaborators.

Every collaborator is a keyword-only parameter so `drills.bootstrap` can bind
the configured adapters, and tests can pass fakes directly.
"""

import logging

from drills.domain.validators import is_valid_email
from drills.domain.value_objects import ChargeStatus, CreditCard, Order, OrderResult
from drills.interfaces.analytics import Analytics
from drills.interfaces.code_generator import CodeGenerator
from drills.interfaces.email import EmailSender
from drills.interfaces.exchange_rates import ExchangeRateProvider
from drills.interfaces.payment import PaymentGateway
from drills.interfaces.shipping import ShippingQuoteProvider

logger = logging.getLogger(__name__)

SHIPPING_UNAVAILABLE = "Shipping Unavailable"
HOME_PATH = "/home"
HOME_CONTENT = "<div>content</div>"
PAYMENT_ERROR = "payment_error"
WELCOME_MESSAGE = "Welcome aboard!"


def get_price_in_currency(
    price: float,
    currency: str,
    *,
    exchange_rates: ExchangeRateProvider,
    base_currency: str = "USD",
) -> float:
    """Convert `price` from the base currency into `currency`."""
    rate = exchange_rates.get_exchange_rate(base_currency, currency)
    logger.debug("Rate %s -> %s: %s", base_currency, currency, rate)
    return price * rate


def get_shipping_info(destination: str, *, shipping: ShippingQuoteProvider) -> str:
    """Describe the shipping cost and time to `destination`."""
    quote = shipping.get_shipping_quote(destination)
    if quote is None:
        logger.info("No shipping quote for %s", destination)
        return SHIPPING_UNAVAILABLE
    return f"Shipping Cost: ${quote.cost} ({quote.estimated_days} Days)"


async def render_page(*, analytics: Analytics) -> str:
    """Render the home page, recording the view with analytics."""
    analytics.track_page_view(HOME_PATH)
    return HOME_CONTENT


async def submit_order(
    order: Order, credit_card: CreditCard, *, payment: PaymentGateway
) -> OrderResult:
    """Charge the card for the order total.

    Returns:
        `OrderResult(success=True)`, or a failed result with
        `error="payment_error"` when the gateway declines the charge.

    Raises:
        Exception: Anything raised by the gateway propagates unchanged.
    """
    result = await payment.charge(credit_card, order.total_amount)
    if result.status == ChargeStatus.FAILED:
        logger.warning("Payment failed for order of %s", order.total_amount)
        return OrderResult(success=False, error=PAYMENT_ERROR)
    return OrderResult(success=True)


async def sign_up(email: str, *, mailer: EmailSender) -> bool:
    """Register `email` and send a welcome message.

    Returns:
        False without sending anything if the address is not valid.
    """
    if not is_valid_email(email):
        logger.info("Rejected sign-up with invalid email %r", email)
        return False
    await mailer.send_email(email, WELCOME_MESSAGE)
    return True


async def login(email: str, *, security: CodeGenerator, mailer: EmailSender) -> None:
    """Email a fresh one-time login code to `email`."""
    code = security.generate_code()
    await mailer.send_email(email, str(code))
    logger.debug("Login code sent to %s", email)
