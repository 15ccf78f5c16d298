from datetime import datetime, timezone

from boat_rental.booking.domain.value_object import BookingId
from boat_rental.payment.domain.enum import PaymentMethod, PaymentStatus
from boat_rental.payment.domain.value_object import PaymentId
from boat_rental.shared.domain import AggregateRoot, Money, ResourceId
from boat_rental.shared.domain.exception import BusinessRuleViolationException


class Payment(AggregateRoot[PaymentId]):
    """決済（1回の課金試行）

    予約（booking_id）またはボート（resource_id）のどちらか一方に紐づく。
    """

    def __init__(
        self,
        id: PaymentId,
        amount: Money,
        method: PaymentMethod,
        booking_id: BookingId | None = None,
        resource_id: ResourceId | None = None,
        status: PaymentStatus = PaymentStatus.PENDING,
        transaction_id: str | None = None,
        gateway_message: str | None = None,
        gateway_response: str | None = None,
        created_at: datetime | None = None,
        processed_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        self._amount = amount
        self._method = method
        self._booking_id = booking_id
        self._resource_id = resource_id
        self._status = status
        self._transaction_id = transaction_id
        self._gateway_message = gateway_message
        self._gateway_response = gateway_response
        self._created_at = created_at or datetime.now(timezone.utc)
        self._processed_at = processed_at

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def method(self) -> PaymentMethod:
        return self._method

    @property
    def booking_id(self) -> BookingId | None:
        return self._booking_id

    @property
    def resource_id(self) -> ResourceId | None:
        return self._resource_id

    @property
    def status(self) -> PaymentStatus:
        return self._status

    @property
    def transaction_id(self) -> str | None:
        return self._transaction_id

    @property
    def gateway_message(self) -> str | None:
        return self._gateway_message

    @property
    def gateway_response(self) -> str | None:
        return self._gateway_response

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def processed_at(self) -> datetime | None:
        return self._processed_at

    def record_gateway_result(
        self,
        status: PaymentStatus,
        transaction_id: str,
        message: str,
        processed_at: datetime,
        gateway_response: str | None = None,
    ) -> None:
        """同期課金の結果を記録する（未処理の決済に一度だけ）"""
        if self._transaction_id is not None:
            raise BusinessRuleViolationException(
                "Gateway result already recorded for this payment"
            )
        self._status = status
        self._transaction_id = transaction_id
        self._gateway_message = message
        self._gateway_response = gateway_response
        self._processed_at = processed_at

    def record_gateway_failure(self, message: str, failed_at: datetime) -> None:
        """ゲートウェイ通信の失敗を記録する"""
        if self._status.is_terminal:
            raise BusinessRuleViolationException(
                f"Cannot fail a {self._status.value} payment"
            )
        self._status = PaymentStatus.CANCELLED
        self._gateway_message = message
        self._processed_at = failed_at

    def can_advance_to(self, status: PaymentStatus) -> bool:
        """前進方向の遷移のみ許可する"""
        return not self._status.is_terminal and status.is_terminal

    def advance_to(
        self, status: PaymentStatus, message: str | None, at: datetime
    ) -> bool:
        """非同期通知によるステータス更新

        Returns:
            変更した場合 True。同一ステータス・後退方向の場合は何もせず False。
        """
        if status == self._status or not self.can_advance_to(status):
            return False
        self._status = status
        if message:
            self._gateway_message = message
        self._processed_at = at
        return True
