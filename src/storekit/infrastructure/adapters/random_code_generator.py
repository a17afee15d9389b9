"""Six-digit one-time codes from the OS random source."""

from __future__ import annotations

import secrets

from storekit.domain.port.code_generator import CodeGenerator


class RandomCodeGenerator(CodeGenerator):

    def generate_code(self) -> int:
        return 100_000 + secrets.randbelow(900_000)
