"""Interface for sending emails."""

import abc

# pylint: disable=too-few-public-methods


class EmailSender(abc.ABC):
    """Contract for an asynchronous email sender."""

    @abc.abstractmethod
    async def send_email(self, address: str, message: str) -> None:
        """Send `message` to `address`.

        Raises:
            Exception: Delivery failures propagate to the caller unchanged.
        """
