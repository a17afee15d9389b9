"""Abstract outbound email capability."""

from __future__ import annotations

from abc import ABC, abstractmethod


class EmailSender(ABC):

    @abstractmethod
    async def send_email(self, address: str, message: str) -> None:
        """Send *message* to *address*."""
