"""JSON-file-backed minimum driving age per country code.

The file holds an object such as ``{"US": 16, "UK": 17}``. A missing file
means the built-in table is used.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storekit.domain.exceptions import ConfigurationError
from storekit.domain.service.validators import DEFAULT_LEGAL_DRIVING_AGES

logger = logging.getLogger(__name__)


class JsonDrivingAgeTable:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> dict[str, int]:
        if not self._file_path.exists():
            logger.debug("%s not found, using built-in driving ages", self._file_path)
            return dict(DEFAULT_LEGAL_DRIVING_AGES)

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Malformed driving age file {self._file_path}: {exc}"
            ) from exc

        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Driving age file {self._file_path} must contain an object"
            )

        table: dict[str, int] = {}
        for country, age in raw.items():
            if isinstance(age, bool) or not isinstance(age, int) or age <= 0:
                raise ConfigurationError(
                    f"Driving age for '{country}' must be a positive integer, got {age!r}"
                )
            table[country] = age
        return table
