"""Dev email sender: logs messages instead of sending them."""

from __future__ import annotations

import logging

from storekit.domain.port.email_sender import EmailSender

logger = logging.getLogger(__name__)


class DevEmailSender(EmailSender):

    async def send_email(self, address: str, message: str) -> None:
        logger.info("Email to %s: %s", address, message)
