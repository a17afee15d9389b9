"""Dev payment gateway: approves every charge without contacting a provider.

Card details are never logged.
"""

from __future__ import annotations

import logging

from storekit.domain.model.order import ChargeResult, ChargeStatus
from storekit.domain.port.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)


class DevPaymentGateway(PaymentGateway):

    async def charge(self, card_details: str, amount: float) -> ChargeResult:
        if amount <= 0:
            logger.info("Dev charge declined for non-positive amount %s", amount)
            return ChargeResult(ChargeStatus.FAILED)
        logger.info("Dev charge approved for %s", amount)
        return ChargeResult(ChargeStatus.SUCCESS)
