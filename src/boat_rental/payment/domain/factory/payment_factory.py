from boat_rental.payment.domain.entity import Payment
from boat_rental.payment.domain.enum import PaymentStatus
from boat_rental.payment.domain.service import PaymentInput
from boat_rental.payment.domain.value_object import PaymentId
from boat_rental.shared.domain import Currency, Money


class PaymentFactory:
    """決済エンティティのファクトリ

    - 検証済みの決済入力から PENDING の決済を生成する
    """

    def create(self, payment_input: PaymentInput) -> Payment:
        description = (
            payment_input.description
            or f"Payment via {payment_input.payment_method.value}"
        )
        return Payment(
            id=PaymentId.generate(),
            amount=Money(payment_input.amount, Currency(payment_input.currency)),
            method=payment_input.payment_method,
            booking_id=payment_input.booking_id,
            resource_id=payment_input.resource_id,
            status=PaymentStatus.PENDING,
            gateway_message=description,
        )
