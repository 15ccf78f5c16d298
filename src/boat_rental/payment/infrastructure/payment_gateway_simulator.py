import random
import time
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal

from aws_lambda_powertools import Logger

from boat_rental.payment.domain import (
    GatewayCharge,
    GatewayOutcome,
    PaymentGateway,
    PaymentMethod,
)
from boat_rental.shared.domain import Money
from boat_rental.shared.domain.exception import PaymentGatewayException

logger = Logger(child=True)

APPROVED_CARD = "4111111111111111"
DECLINED_CARD = "4222222222222222"
PENDING_CARD = "4333333333333333"

RANDOM_APPROVAL_LIMIT = Decimal("10000")
RANDOM_APPROVAL_RATE = 0.9

_MESSAGES = {
    GatewayOutcome.APPROVED: "Payment approved",
    GatewayOutcome.DECLINED: "Payment declined by issuer",
    GatewayOutcome.PENDING: "Payment awaiting confirmation",
}


class PaymentGatewaySimulator(PaymentGateway):
    """決済ゲートウェイのシミュレータ

    テスト用カード番号で結果を固定できる。それ以外は金額が上限未満なら
    90% の確率で承認、上限以上は拒否する。
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        delay_seconds: tuple[float, float] | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._delay_seconds = delay_seconds
        self._sleep = sleep
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def charge(
        self,
        amount: Money,
        method: PaymentMethod,
        card_fingerprint: str | None = None,
        timeout_seconds: float | None = None,
    ) -> GatewayCharge:
        if self._delay_seconds:
            delay = self._rng.uniform(*self._delay_seconds)
            if timeout_seconds is not None and delay > timeout_seconds:
                self._sleep(timeout_seconds)
                raise PaymentGatewayException(
                    f"Payment gateway timed out after {timeout_seconds}s"
                )
            self._sleep(delay)

        outcome = self.decide(amount.amount, card_fingerprint)
        transaction_id = f"PSB_{uuid.uuid4().hex}"
        logger.debug(
            "Simulated gateway charge",
            extra={
                "transaction_id": transaction_id,
                "payment_method": method.value,
                "outcome": outcome.value,
            },
        )
        return GatewayCharge(
            outcome=outcome,
            status_code=int(outcome.status_code),
            transaction_id=transaction_id,
            message=_MESSAGES[outcome],
            processed_at=self._clock(),
        )

    def decide(self, amount: Decimal, card_fingerprint: str | None) -> GatewayOutcome:
        """課金結果を判定する"""
        if card_fingerprint == APPROVED_CARD:
            return GatewayOutcome.APPROVED
        if card_fingerprint == DECLINED_CARD:
            return GatewayOutcome.DECLINED
        if card_fingerprint == PENDING_CARD:
            return GatewayOutcome.PENDING
        if amount < RANDOM_APPROVAL_LIMIT and self._rng.random() < RANDOM_APPROVAL_RATE:
            return GatewayOutcome.APPROVED
        return GatewayOutcome.DECLINED
