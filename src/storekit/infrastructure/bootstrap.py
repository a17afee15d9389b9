"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from storekit.domain.model.coupon import CouponCatalog
from storekit.domain.port.clock import SystemClock
from storekit.infrastructure.adapters.dev_email_sender import DevEmailSender
from storekit.infrastructure.adapters.dev_payment_gateway import DevPaymentGateway
from storekit.infrastructure.adapters.fixed_rate_currency_service import (
    FixedRateCurrencyService,
)
from storekit.infrastructure.adapters.flat_rate_shipping_service import (
    FlatRateShippingService,
)
from storekit.infrastructure.adapters.logging_analytics_service import (
    LoggingAnalyticsService,
)
from storekit.infrastructure.adapters.random_code_generator import (
    RandomCodeGenerator,
)
from storekit.infrastructure.persistence.json_coupon_catalog import (
    JsonCouponCatalog,
)
from storekit.infrastructure.persistence.json_driving_age_table import (
    JsonDrivingAgeTable,
)

DATA_DIR_ENV = "STOREKIT_DATA_DIR"

SHIPPING_DESTINATIONS = {"Fairfield", "Sydney", "London", "New York"}

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def coupon_catalog() -> CouponCatalog:
    return JsonCouponCatalog(data_dir() / "coupons.json").load()


def legal_driving_ages() -> dict[str, int]:
    return JsonDrivingAgeTable(data_dir() / "driving_ages.json").load()


def clock() -> SystemClock:
    return SystemClock()


def payment_gateway() -> DevPaymentGateway:
    return DevPaymentGateway()


def email_sender() -> DevEmailSender:
    return DevEmailSender()


def code_generator() -> RandomCodeGenerator:
    return RandomCodeGenerator()


def currency_service() -> FixedRateCurrencyService:
    return FixedRateCurrencyService()


def shipping_service() -> FlatRateShippingService:
    return FlatRateShippingService(SHIPPING_DESTINATIONS)


def analytics_service() -> LoggingAnalyticsService:
    return LoggingAnalyticsService()
