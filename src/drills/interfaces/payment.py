"""Interface for payment gateways."""

import abc

from drills.domain.value_objects import ChargeResult, CreditCard

# pylint: disable=too-few-public-methods


class PaymentGateway(abc.ABC):
    """Contract for an asynchronous payment gateway."""

    @abc.abstractmethod
    async def charge(self, card: CreditCard, amount: float) -> ChargeResult:
        """Charge `amount` to `card`.

        Returns:
            A `ChargeResult` whose status is SUCCESS or FAILED. A declined
            charge is a FAILED result, not an exception.
        """
