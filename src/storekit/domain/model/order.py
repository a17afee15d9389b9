"""Order and the outcome of submitting it.

Orders are built by the caller for a single submission and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PAYMENT_ERROR = "payment_error"


@dataclass(frozen=True)
class Order:

    total_amount: float


class ChargeStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ChargeResult:
    """What the payment gateway reports back for a single charge."""

    status: ChargeStatus

    @property
    def succeeded(self) -> bool:
        return self.status == ChargeStatus.SUCCESS


@dataclass(frozen=True)
class OrderResult:
    """Typed result of an order submission.

    Payment failures are reported here instead of being raised.
    """

    success: bool
    error: str | None = None

    @staticmethod
    def ok() -> OrderResult:
        return OrderResult(success=True)

    @staticmethod
    def payment_failed() -> OrderResult:
        return OrderResult(success=False, error=PAYMENT_ERROR)

    def to_dict(self) -> dict[str, object]:
        if self.success:
            return {"success": True}
        return {"success": False, "error": self.error}
