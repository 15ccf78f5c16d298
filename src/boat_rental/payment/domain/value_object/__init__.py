from .card_data import CardData as CardData
from .payment_id import PaymentId as PaymentId
