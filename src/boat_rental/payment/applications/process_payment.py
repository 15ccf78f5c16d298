from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from aws_lambda_powertools import Logger

from boat_rental.payment.domain import (
    GatewayCharge,
    Payment,
    PaymentFactory,
    PaymentGateway,
    PaymentId,
    PaymentInput,
    PaymentInputValidator,
    PaymentRepository,
    PaymentStatus,
    map_gateway_status,
)
from boat_rental.shared.domain import Money
from boat_rental.shared.domain.exception import (
    PaymentGatewayException,
    PaymentValidationException,
)

logger = Logger(child=True)


class PaymentErrorKind(str, Enum):
    """決済失敗の種類"""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    GATEWAY_ERROR = "GATEWAY_ERROR"
    SYSTEM_ERROR = "SYSTEM_ERROR"


@dataclass(frozen=True)
class PaymentResult:
    """決済処理の結果

    success は CONFIRMED の場合のみ True。PENDING は成功でも失敗でもなく、
    error_kind を持たない未確定の結果として返す。
    """

    success: bool
    status: PaymentStatus
    message: str
    processed_at: datetime
    payment_id: PaymentId | None = None
    transaction_id: str | None = None
    error_kind: PaymentErrorKind | None = None

    @property
    def is_pending(self) -> bool:
        return self.error_kind is None and self.status == PaymentStatus.PENDING

    @classmethod
    def from_payment(cls, payment: Payment) -> PaymentResult:
        return cls(
            success=payment.status == PaymentStatus.CONFIRMED,
            status=payment.status,
            message=payment.gateway_message or "",
            processed_at=payment.processed_at or datetime.now(timezone.utc),
            payment_id=payment.id,
            transaction_id=payment.transaction_id,
        )

    @classmethod
    def failed(
        cls,
        kind: PaymentErrorKind,
        message: str,
        payment_id: PaymentId | None = None,
    ) -> PaymentResult:
        return cls(
            success=False,
            status=PaymentStatus.CANCELLED,
            message=message,
            processed_at=datetime.now(timezone.utc),
            payment_id=payment_id,
            error_kind=kind,
        )


class PaymentOrchestrator:
    """決済処理ユースケース

    1. 入力検証
    2. PENDING で決済を保存
    3. ゲートウェイで課金（timeout_seconds はゲートウェイに渡す）
    4. 応答コードをステータスに変換して決済を更新
       （課金に失敗した場合も CANCELLED として更新する）

    例外は送出せず、失敗は PaymentResult の error_kind で返す。
    """

    def __init__(
        self,
        repository: PaymentRepository,
        gateway: PaymentGateway,
        factory: PaymentFactory | None = None,
        validator: PaymentInputValidator | None = None,
        timeout_seconds: float | None = 10.0,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repository = repository
        self._gateway = gateway
        self._factory = factory or PaymentFactory()
        self._validator = validator or PaymentInputValidator()
        self._timeout_seconds = timeout_seconds
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def process(self, payment_input: PaymentInput) -> PaymentResult:
        """決済を処理する"""
        logger.info(
            "Processing payment",
            extra={
                "amount": str(payment_input.amount),
                "payment_method": getattr(payment_input.payment_method, "value", None),
                "booking_id": str(payment_input.booking_id or ""),
                "resource_id": str(payment_input.resource_id or ""),
            },
        )
        payment: Payment | None = None
        try:
            self._validator.validate(payment_input)
            payment = self._factory.create(payment_input)
            self._repository.save(payment)

            try:
                charge = self._charge(payment.amount, payment_input)
            except PaymentGatewayException as e:
                logger.error(
                    "Payment gateway error",
                    extra={"payment_id": str(payment.id), "error": str(e)},
                )
                return self._record_failure(
                    payment, PaymentErrorKind.GATEWAY_ERROR, str(e)
                )
            except Exception:
                logger.exception(
                    "Unexpected error from payment gateway",
                    extra={"payment_id": str(payment.id)},
                )
                return self._record_failure(
                    payment,
                    PaymentErrorKind.SYSTEM_ERROR,
                    "Payment system temporarily unavailable",
                )

            payment.record_gateway_result(
                status=map_gateway_status(charge.status_code),
                transaction_id=charge.transaction_id,
                message=charge.message,
                processed_at=charge.processed_at,
                gateway_response=charge.summary(),
            )
            self._repository.update(payment)
            logger.info(
                "Payment processed",
                extra={
                    "payment_id": str(payment.id),
                    "transaction_id": charge.transaction_id,
                    "status": payment.status.value,
                },
            )
            return PaymentResult.from_payment(payment)
        except PaymentValidationException as e:
            logger.warning("Payment validation failed", extra={"error": str(e)})
            return PaymentResult.failed(PaymentErrorKind.VALIDATION_ERROR, str(e))
        except Exception:
            logger.exception("Unexpected error while processing payment")
            return PaymentResult.failed(
                PaymentErrorKind.SYSTEM_ERROR,
                "Payment system temporarily unavailable",
                payment_id=payment.id if payment else None,
            )

    def _charge(self, amount: Money, payment_input: PaymentInput) -> GatewayCharge:
        return self._gateway.charge(
            amount,
            payment_input.payment_method,
            payment_input.card_fingerprint,
            timeout_seconds=self._timeout_seconds,
        )

    def _record_failure(
        self, payment: Payment, kind: PaymentErrorKind, message: str
    ) -> PaymentResult:
        """課金できなかった決済を CANCELLED として記録する"""
        payment.record_gateway_failure(message, self._clock())
        self._repository.update(payment)
        return PaymentResult.failed(kind, message, payment_id=payment.id)
