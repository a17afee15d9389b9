"""JSON-file-backed coupon catalog.

The file holds a list of ``{"code": ..., "discount": ...}`` objects.
A missing file means the built-in catalog is used.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storekit.domain.exceptions import ConfigurationError, ValidationError
from storekit.domain.model.coupon import Coupon, CouponCatalog
from storekit.domain.service.discount import DEFAULT_COUPONS

logger = logging.getLogger(__name__)


class JsonCouponCatalog:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def load(self) -> CouponCatalog:
        if not self._file_path.exists():
            logger.debug("%s not found, using built-in coupons", self._file_path)
            return CouponCatalog(DEFAULT_COUPONS)

        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Malformed coupon file {self._file_path}: {exc}"
            ) from exc

        if not isinstance(raw, list):
            raise ConfigurationError(
                f"Coupon file {self._file_path} must contain a list"
            )

        try:
            return CouponCatalog(
                Coupon(code=item["code"], discount=item["discount"]) for item in raw
            )
        except (KeyError, TypeError) as exc:
            raise ConfigurationError(
                f"Coupon entries in {self._file_path} need 'code' and 'discount'"
            ) from exc
        except ValidationError as exc:
            raise ConfigurationError(f"{self._file_path}: {exc}") from exc
