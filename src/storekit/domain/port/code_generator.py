"""Abstract one-time security code capability."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CodeGenerator(ABC):

    @abstractmethod
    def generate_code(self) -> int:
        """Return a fresh one-time code."""
