from datetime import datetime, timezone
from decimal import Decimal

import pytest

from boat_rental.booking.domain import BookingId
from boat_rental.payment.domain import (
    Payment,
    PaymentId,
    PaymentInput,
    PaymentMethod,
    PaymentStatus,
)
from boat_rental.shared.domain import Money

PROCESSED_AT = datetime(2025, 1, 2, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def create_payment():
    """Payment を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: PaymentStatus = PaymentStatus.PENDING,
        payment_id: str = "payment-1",
        booking_id: str | None = "booking-1",
        amount: Decimal = Decimal("1000"),
        transaction_id: str | None = None,
    ) -> Payment:
        return Payment(
            id=PaymentId(value=payment_id),
            amount=Money.brl(amount),
            method=PaymentMethod.CREDIT_CARD,
            booking_id=BookingId(value=booking_id) if booking_id else None,
            status=status,
            transaction_id=transaction_id,
        )

    return _factory


@pytest.fixture
def create_payment_input(create_card):
    """PaymentInput を生成する Factory fixture"""

    def _factory(
        amount: Decimal | None = Decimal("1000"),
        payment_method: PaymentMethod | None = PaymentMethod.CREDIT_CARD,
        booking_id: str | None = "booking-1",
        resource_id=None,
        card=None,
        installments: int = 1,
        **card_fields,
    ) -> PaymentInput:
        if card is None and payment_method == PaymentMethod.CREDIT_CARD:
            card = create_card(**card_fields)
        return PaymentInput(
            amount=amount,
            payment_method=payment_method,
            booking_id=BookingId(value=booking_id) if booking_id else None,
            resource_id=resource_id,
            card=card,
            installments=installments,
        )

    return _factory
