from collections.abc import Callable
from datetime import datetime, timezone

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from boat_rental.booking.domain import BookingRepository, BookingStatus
from boat_rental.payment.domain import (
    Payment,
    PaymentRepository,
    PaymentStatus,
    map_gateway_status,
)
from boat_rental.shared.domain import OptimisticLockException
from boat_rental.webhook.domain import (
    Ack,
    GatewayNotification,
    Rejected,
    verify_signature,
)

logger = Logger(child=True)


class WebhookHandler:
    """ゲートウェイ通知による決済・予約ステータスの非同期更新

    署名検証とトランザクション特定に成功すれば、状態が変わらなくても Ack を返す。
    同じ通知を何度受け取っても結果は1回受け取った場合と同じになる。
    """

    def __init__(
        self,
        secret: str,
        payments: PaymentRepository,
        bookings: BookingRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._secret = secret
        self._payments = payments
        self._bookings = bookings
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def on_gateway_notification(
        self, raw_body: str | bytes, signature: str | None
    ) -> Ack | Rejected:
        body = raw_body.encode("utf-8") if isinstance(raw_body, str) else raw_body
        if not verify_signature(self._secret, body, signature):
            logger.warning("Rejected gateway notification with invalid signature")
            return Rejected("invalid signature")

        try:
            notification = GatewayNotification.model_validate_json(body)
        except ValidationError as e:
            logger.warning(
                "Rejected malformed gateway notification",
                extra={"errors": e.error_count()},
            )
            return Rejected("invalid payload")

        payment = self._payments.find_by_transaction_id(notification.transaction_code)
        if payment is None:
            logger.warning(
                "Gateway notification for unknown transaction",
                extra={"transaction_id": notification.transaction_code},
            )
            return Rejected("unknown transaction")

        return self._apply(payment, notification)

    def _apply(self, payment: Payment, notification: GatewayNotification) -> Ack:
        previous_status = payment.status
        new_status = map_gateway_status(notification.status)
        log_context = {
            "payment_id": str(payment.id),
            "transaction_id": notification.transaction_code,
            "previous_status": previous_status.value,
            "notified_status": new_status.value,
        }

        message = f"Gateway notification status {notification.status}"
        if not payment.advance_to(new_status, message, self._clock()):
            logger.info("Gateway notification caused no change", extra=log_context)
            # 確定済みの決済に予約の状態を揃える
            self._apply_to_booking(payment)
            return Ack("no change")

        try:
            self._payments.update(payment, expected_status=previous_status)
        except OptimisticLockException:
            logger.info(
                "Payment already updated by a concurrent notification",
                extra=log_context,
            )
            current = self._payments.find_by_id(payment.id)
            if current is not None:
                self._apply_to_booking(current)
            return Ack("already applied")

        logger.info("Payment status updated from notification", extra=log_context)
        self._apply_to_booking(payment)
        return Ack("payment updated", changed=True)

    def _apply_to_booking(self, payment: Payment) -> None:
        """確定した決済結果を PENDING の予約に反映する

        何度呼んでも結果は同じ。予約が PENDING でなければ何もしない。
        """
        if payment.booking_id is None or not payment.status.is_terminal:
            return
        booking = self._bookings.find_by_id(payment.booking_id)
        if booking is None or booking.status != BookingStatus.PENDING:
            logger.info(
                "No pending booking to update",
                extra={"booking_id": str(payment.booking_id)},
            )
            return

        if payment.status == PaymentStatus.CONFIRMED:
            booking.confirm()
        else:
            booking.cancel()

        try:
            self._bookings.update(booking, expected_status=BookingStatus.PENDING)
        except OptimisticLockException:
            logger.info(
                "Booking already transitioned",
                extra={"booking_id": str(booking.id)},
            )
            return
        logger.info(
            "Booking status updated from payment notification",
            extra={"booking_id": str(booking.id), "status": booking.status.value},
        )
