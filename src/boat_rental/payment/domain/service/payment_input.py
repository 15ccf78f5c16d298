from dataclasses import dataclass
from decimal import Decimal

from boat_rental.booking.domain.value_object import BookingId
from boat_rental.payment.domain.enum import PaymentMethod
from boat_rental.payment.domain.value_object import CardData
from boat_rental.shared.domain import ResourceId


@dataclass(frozen=True)
class PaymentInput:
    """決済要求の入力

    amount は検証前の値を受け取るため Money ではなく Decimal で持つ。
    """

    amount: Decimal | None
    payment_method: PaymentMethod | None
    currency: str = "BRL"
    booking_id: BookingId | None = None
    resource_id: ResourceId | None = None
    card: CardData | None = None
    user_email: str | None = None
    description: str | None = None
    installments: int = 1

    @property
    def card_fingerprint(self) -> str | None:
        """カード決済の場合のみゲートウェイにカード識別子を渡す"""
        if self.payment_method == PaymentMethod.CREDIT_CARD and self.card:
            return self.card.fingerprint
        return None
