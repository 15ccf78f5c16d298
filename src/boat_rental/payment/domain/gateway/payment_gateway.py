from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from boat_rental.payment.domain.enum import PaymentMethod
from boat_rental.shared.domain import Money

from .status_mapping import GatewayStatusCode


class GatewayOutcome(str, Enum):
    """ゲートウェイの課金判定"""

    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    PENDING = "PENDING"

    @property
    def status_code(self) -> GatewayStatusCode:
        return _OUTCOME_CODES[self]


_OUTCOME_CODES = {
    GatewayOutcome.APPROVED: GatewayStatusCode.PAID,
    GatewayOutcome.DECLINED: GatewayStatusCode.CANCELLED,
    GatewayOutcome.PENDING: GatewayStatusCode.AWAITING_PAYMENT,
}


@dataclass(frozen=True)
class GatewayCharge:
    """課金要求に対するゲートウェイの応答"""

    outcome: GatewayOutcome
    status_code: int
    transaction_id: str
    message: str
    processed_at: datetime

    def summary(self) -> str:
        """監査用に保存する応答の要約"""
        return (
            f"outcome={self.outcome.value} code={self.status_code} "
            f"transaction={self.transaction_id}"
        )


class PaymentGateway(ABC):
    """外部決済ゲートウェイのインターフェース

    通信自体に失敗した場合や timeout_seconds 以内に応答できない場合は
    PaymentGatewayException を送出する。
    承認・拒否などの判定結果は例外ではなく GatewayCharge で返す。
    """

    @abstractmethod
    def charge(
        self,
        amount: Money,
        method: PaymentMethod,
        card_fingerprint: str | None = None,
        timeout_seconds: float | None = None,
    ) -> GatewayCharge:
        raise NotImplementedError
