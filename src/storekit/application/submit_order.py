"""Application service: Submit Order use case.

Charges the customer once through the payment gateway and translates the
gateway's answer into an OrderResult.
"""

from __future__ import annotations

import logging

from storekit.domain.model.order import Order, OrderResult
from storekit.domain.port.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(self, payment: PaymentGateway) -> None:
        self._payment = payment

    async def handle(self, order: Order, credit_card_details: str) -> OrderResult:
        result = await self._payment.charge(credit_card_details, order.total_amount)

        if not result.succeeded:
            logger.warning(
                "Payment declined for order of %s (status=%s)",
                order.total_amount,
                result.status.value,
            )
            return OrderResult.payment_failed()

        logger.info("Order of %s charged", order.total_amount)
        return OrderResult.ok()
