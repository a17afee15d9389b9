"""Application service: Login use case (one-time code by email)."""

from __future__ import annotations

import logging

from storekit.domain.port.code_generator import CodeGenerator
from storekit.domain.port.email_sender import EmailSender

logger = logging.getLogger(__name__)


class LoginHandler:

    def __init__(
        self,
        code_generator: CodeGenerator,
        email_sender: EmailSender,
    ) -> None:
        self._code_generator = code_generator
        self._email_sender = email_sender

    async def handle(self, email: str) -> None:
        code = self._code_generator.generate_code()
        await self._email_sender.send_email(email, str(code))
        logger.info("One-time login code sent to %s", email)
