"""Simulated payment gateway."""

import asyncio
import logging

from drills.domain.value_objects import ChargeResult, ChargeStatus, CreditCard
from drills.interfaces.payment import PaymentGateway

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class SimulatedPaymentGateway(PaymentGateway):
    """Gateway that approves or declines charges locally.

    A charge is declined when the amount is not positive, exceeds `limit`,
    or the card number is not 8 to 19 digits. Each charge waits `latency`
    seconds to mimic a network round trip.
    """

    def __init__(self, limit: float = 1_000_000.0, latency: float = 0.0) -> None:
        self._limit = limit
        self._latency = latency

    def _approves(self, card: CreditCard, amount: float) -> bool:
        number = card.number.replace(" ", "")
        if not number.isdigit() or not 8 <= len(number) <= 19:  # pylint: disable=magic-value-comparison
            return False
        return 0 < amount <= self._limit

    async def charge(self, card: CreditCard, amount: float) -> ChargeResult:
        await asyncio.sleep(self._latency)
        if self._approves(card, amount):
            logger.info("Charge of %s approved", amount)
            return ChargeResult(status=ChargeStatus.SUCCESS)
        logger.warning("Charge of %s declined", amount)
        return ChargeResult(status=ChargeStatus.FAILED)
