"""Abstract wall clock.

The only ambient input the store calendar rules read. Injected so the
rules can be exercised at any date and time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local date and time."""


class SystemClock(Clock):
    """Reads the host's local time."""

    def now(self) -> datetime:
        return datetime.now()
