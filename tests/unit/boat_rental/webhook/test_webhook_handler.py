import json
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from boat_rental.booking.domain import BookingId, BookingStatus
from boat_rental.payment.domain import Payment, PaymentId, PaymentMethod, PaymentStatus
from boat_rental.shared.domain import Money, OptimisticLockException, ResourceId
from boat_rental.webhook.applications import WebhookHandler
from boat_rental.webhook.domain import Ack, Rejected, sign

SECRET = "test-secret"
PROCESSED_AT = datetime(2025, 1, 2, 10, 0, tzinfo=timezone.utc)


def notification(transaction_code: str, status: int, key: str = "transactionCode") -> bytes:
    return json.dumps(
        {
            "notificationCode": "NC-1",
            "notificationType": "transaction",
            key: transaction_code,
            "reference": "booking-1",
            "status": status,
        }
    ).encode()


class TestWebhookHandler:
    @pytest.fixture
    def handler(self, payment_repository, booking_repository):
        return WebhookHandler(
            secret=SECRET, payments=payment_repository, bookings=booking_repository
        )

    @pytest.fixture
    def pending(self, payment_repository, booking_repository, create_booking):
        """決済待ちの予約と決済を用意する"""
        booking = create_booking(status=BookingStatus.PENDING)
        booking_repository.save(booking)
        payment = Payment(
            id=PaymentId(value="payment-1"),
            amount=booking.total_price,
            method=PaymentMethod.PIX,
            booking_id=booking.id,
            status=PaymentStatus.PENDING,
            transaction_id="PSB_abc",
        )
        payment_repository.save(payment)
        return booking, payment

    def deliver(self, handler, body: bytes, secret: str = SECRET):
        return handler.on_gateway_notification(body, sign(secret, body))

    def test_paid_notification_confirms_payment_and_booking(
        self, handler, pending, payment_repository, booking_repository
    ):
        booking, payment = pending

        outcome = self.deliver(handler, notification("PSB_abc", 3))

        assert outcome == Ack("payment updated", changed=True)
        assert payment_repository.find_by_id(payment.id).status == PaymentStatus.CONFIRMED
        assert booking_repository.find_by_id(booking.id).status == BookingStatus.CONFIRMED

    def test_repeated_notification_is_a_no_op(
        self, handler, pending, payment_repository, booking_repository
    ):
        booking, payment = pending
        body = notification("PSB_abc", 3)

        self.deliver(handler, body)
        snapshot = (
            payment_repository.find_by_id(payment.id).status,
            booking_repository.find_by_id(booking.id).status,
        )
        second = self.deliver(handler, body)

        assert isinstance(second, Ack)
        assert not second.changed
        assert (
            payment_repository.find_by_id(payment.id).status,
            booking_repository.find_by_id(booking.id).status,
        ) == snapshot

    def test_cancel_notification_releases_pending_booking(
        self, handler, pending, payment_repository, booking_repository
    ):
        booking, payment = pending

        self.deliver(handler, notification("PSB_abc", 7))

        assert payment_repository.find_by_id(payment.id).status == PaymentStatus.CANCELLED
        assert booking_repository.find_by_id(booking.id).status == BookingStatus.CANCELLED

    def test_regression_after_confirmation_is_ignored(
        self, handler, pending, payment_repository, booking_repository
    ):
        booking, payment = pending
        self.deliver(handler, notification("PSB_abc", 3))

        outcome = self.deliver(handler, notification("PSB_abc", 1))

        assert outcome == Ack("no change")
        assert payment_repository.find_by_id(payment.id).status == PaymentStatus.CONFIRMED

    def test_in_analysis_notification_keeps_pending(
        self, handler, pending, payment_repository, booking_repository
    ):
        booking, payment = pending

        outcome = self.deliver(handler, notification("PSB_abc", 2))

        assert outcome == Ack("no change")
        assert booking_repository.find_by_id(booking.id).status == BookingStatus.PENDING

    def test_unknown_status_code_is_acknowledged(
        self, handler, pending, payment_repository
    ):
        booking, payment = pending

        outcome = self.deliver(handler, notification("PSB_abc", 99))

        assert isinstance(outcome, Ack)
        assert payment_repository.find_by_id(payment.id).status == PaymentStatus.PENDING

    def test_code_alias_is_accepted(self, handler, pending, payment_repository):
        booking, payment = pending

        self.deliver(handler, notification("PSB_abc", 3, key="code"))

        assert payment_repository.find_by_id(payment.id).status == PaymentStatus.CONFIRMED

    def test_invalid_signature_is_rejected(self, handler, pending, payment_repository):
        booking, payment = pending

        outcome = self.deliver(handler, notification("PSB_abc", 3), secret="wrong")

        assert outcome == Rejected("invalid signature")
        assert payment_repository.find_by_id(payment.id).status == PaymentStatus.PENDING

    def test_unknown_transaction_is_rejected(self, handler, pending):
        outcome = self.deliver(handler, notification("PSB_missing", 3))

        assert outcome == Rejected("unknown transaction")

    def test_malformed_payload_is_rejected(self, handler):
        outcome = self.deliver(handler, b'{"status": "paid"}')

        assert outcome == Rejected("invalid payload")

    def test_string_body_is_accepted(self, handler, pending, payment_repository):
        booking, payment = pending
        body = notification("PSB_abc", 3).decode()

        outcome = handler.on_gateway_notification(body, sign(SECRET, body.encode()))

        assert isinstance(outcome, Ack)

    def test_payment_without_booking_is_updated_alone(
        self, handler, payment_repository, booking_repository
    ):
        payment_repository.save(
            Payment(
                id=PaymentId(value="direct"),
                amount=Money.brl(Decimal("100")),
                method=PaymentMethod.BOLETO,
                resource_id=ResourceId(value="boat-1"),
                transaction_id="PSB_direct",
            )
        )

        outcome = self.deliver(handler, notification("PSB_direct", 4))

        assert outcome.changed
        assert booking_repository.bookings == {}

    def test_lost_race_is_acknowledged(self, racing_repositories):
        payments, bookings = racing_repositories
        payments.update.side_effect = OptimisticLockException("changed")
        payments.find_by_id.return_value = None
        handler = WebhookHandler(secret=SECRET, payments=payments, bookings=bookings)

        outcome = self.deliver(handler, notification("PSB_abc", 3))

        assert outcome == Ack("already applied")
        bookings.update.assert_not_called()

    def test_redelivery_confirms_booking_left_pending_by_failed_update(
        self, handler, pending, payment_repository, booking_repository, monkeypatch
    ):
        booking, payment = pending
        body = notification("PSB_abc", 3)

        def unavailable(*args, **kwargs):
            raise RuntimeError("ProvisionedThroughputExceededException")

        with monkeypatch.context() as m:
            m.setattr(booking_repository, "update", unavailable)
            with pytest.raises(RuntimeError):
                self.deliver(handler, body)

        assert payment_repository.find_by_id(payment.id).status == PaymentStatus.CONFIRMED
        assert booking_repository.find_by_id(booking.id).status == BookingStatus.PENDING

        outcome = self.deliver(handler, body)

        assert outcome == Ack("no change")
        assert booking_repository.find_by_id(booking.id).status == BookingStatus.CONFIRMED

    def test_lost_race_still_settles_pending_booking(
        self, handler, pending, payment_repository, booking_repository, monkeypatch
    ):
        booking, payment = pending
        stale = payment_repository.find_by_transaction_id("PSB_abc")
        monkeypatch.setattr(
            payment_repository, "find_by_transaction_id", lambda _: stale
        )
        concurrent = payment_repository.find_by_id(payment.id)
        concurrent.advance_to(PaymentStatus.CANCELLED, "declined", PROCESSED_AT)
        payment_repository.update(concurrent)

        outcome = self.deliver(handler, notification("PSB_abc", 7))

        assert outcome == Ack("already applied")
        assert booking_repository.find_by_id(booking.id).status == BookingStatus.CANCELLED

    @pytest.fixture
    def racing_repositories(self):
        payments = MagicMock()
        payments.find_by_transaction_id.return_value = Payment(
            id=PaymentId(value="payment-1"),
            amount=Money.brl(Decimal("100")),
            method=PaymentMethod.PIX,
            booking_id=BookingId(value="booking-1"),
            transaction_id="PSB_abc",
        )
        return payments, MagicMock()
