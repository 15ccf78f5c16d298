from .payment_input import PaymentInput as PaymentInput
from .payment_input_validator import (
    PaymentInputValidator as PaymentInputValidator,
)
