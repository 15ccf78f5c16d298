import re
from decimal import Decimal

from boat_rental.payment.domain.enum import PaymentMethod
from boat_rental.payment.domain.value_object import CardData
from boat_rental.shared.domain import Currency
from boat_rental.shared.domain.exception import PaymentValidationException

from .payment_input import PaymentInput

EXPIRATION_PATTERN = re.compile(r"^(0[1-9]|1[0-2])/([0-9]{2}|[0-9]{4})$")
MINIMUM_CARD_DIGITS = 13
MINIMUM_CVV_DIGITS = 3


class PaymentInputValidator:
    """決済入力の検証

    最初に見つかった違反を PaymentValidationException で通知する。
    """

    def __init__(self, max_amount: Decimal = Decimal("10000")) -> None:
        self._max_amount = max_amount

    def validate(self, payment_input: PaymentInput) -> None:
        amount = payment_input.amount
        if amount is None or amount <= 0:
            raise PaymentValidationException("Amount must be greater than zero")
        if amount > self._max_amount:
            raise PaymentValidationException(
                f"Amount exceeds the maximum allowed ({self._max_amount})"
            )
        if payment_input.currency.upper() not in Currency.SUPPORTED:
            raise PaymentValidationException(
                f"Unsupported currency: {payment_input.currency}"
            )
        if payment_input.payment_method is None:
            raise PaymentValidationException("Payment method is required")
        if (payment_input.booking_id is None) == (payment_input.resource_id is None):
            raise PaymentValidationException(
                "Exactly one of bookingId or resourceId is required"
            )
        if payment_input.payment_method == PaymentMethod.CREDIT_CARD:
            self._validate_card(payment_input.card)
        if payment_input.installments < 1:
            raise PaymentValidationException("Installments must be at least 1")

    def _validate_card(self, card: CardData | None) -> None:
        if card is None:
            raise PaymentValidationException(
                "Card data is required for credit card payments"
            )
        number = card.number.replace(" ", "").replace("-", "")
        if not number.isdigit() or len(number) < MINIMUM_CARD_DIGITS:
            raise PaymentValidationException("Invalid card number")
        if not card.holder_name or not card.holder_name.strip():
            raise PaymentValidationException("Card holder name is required")
        if not card.expiration or not EXPIRATION_PATTERN.match(card.expiration):
            raise PaymentValidationException(
                "Invalid expiration date (expected MM/YY or MM/YYYY)"
            )
        if (
            not card.cvv
            or not card.cvv.isdigit()
            or len(card.cvv) < MINIMUM_CVV_DIGITS
        ):
            raise PaymentValidationException("Invalid CVV")
