"""Email sender that keeps an outbox instead of delivering mail."""

import logging
from dataclasses import dataclass

from drills.interfaces.email import EmailSender

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


@dataclass(frozen=True, slots=True)
class SentEmail:
    """An email accepted by the sender."""

    address: str
    message: str


class LoggingEmailSender(EmailSender):
    """Collect emails in `outbox` and log the recipient.

    The message body is logged at DEBUG only, since it may hold a login code.
    """

    def __init__(self) -> None:
        self.outbox: list[SentEmail] = []

    async def send_email(self, address: str, message: str) -> None:
        self.outbox.append(SentEmail(address=address, message=message))
        logger.info("Email queued for %s", address)
        logger.debug("Email body for %s: %s", address, message)
