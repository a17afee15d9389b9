"""Application service: Sign Up use case."""

from __future__ import annotations

import logging
import re

from storekit.domain.port.email_sender import EmailSender

logger = logging.getLogger(__name__)

# local-part "@" domain with at least one dot
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

WELCOME_MESSAGE = "Welcome aboard!"


def is_valid_email(email: object) -> bool:
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


class SignUpHandler:

    def __init__(self, email_sender: EmailSender) -> None:
        self._email_sender = email_sender

    async def handle(self, email: str) -> bool:
        """Register *email* and send a welcome message.

        An invalid address returns False without sending anything.
        """
        if not is_valid_email(email):
            logger.info("Rejected sign-up with invalid email %r", email)
            return False

        await self._email_sender.send_email(email, WELCOME_MESSAGE)
        logger.info("Welcome email sent to %s", email)
        return True
