"""Unit tests for Order, ChargeResult and OrderResult."""

from storekit.domain.model.order import (
    PAYMENT_ERROR,
    ChargeResult,
    ChargeStatus,
    Order,
    OrderResult,
)


class TestChargeResult:

    def test_success(self):
        assert ChargeResult(ChargeStatus.SUCCESS).succeeded is True

    def test_failed(self):
        assert ChargeResult(ChargeStatus.FAILED).succeeded is False

    def test_status_values(self):
        assert ChargeStatus("success") is ChargeStatus.SUCCESS
        assert ChargeStatus("failed") is ChargeStatus.FAILED


class TestOrderResult:

    def test_ok_to_dict(self):
        assert OrderResult.ok().to_dict() == {"success": True}

    def test_payment_failed_to_dict(self):
        result = OrderResult.payment_failed()
        assert result.error == PAYMENT_ERROR
        assert result.to_dict() == {"success": False, "error": "payment_error"}


def test_order_holds_total():
    assert Order(total_amount=120).total_amount == 120
