from enum import Enum


class PaymentMethod(str, Enum):
    """支払い方法"""

    CREDIT_CARD = "CREDIT_CARD"
    PIX = "PIX"
    BOLETO = "BOLETO"
