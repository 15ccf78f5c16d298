from enum import Enum


class PaymentStatus(str, Enum):
    """決済ステータス

    PENDING / UNKNOWN は CONFIRMED / CANCELLED へ進めるが、
    CONFIRMED / CANCELLED は終端状態。
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"

    @property
    def is_terminal(self) -> bool:
        return self in (PaymentStatus.CONFIRMED, PaymentStatus.CANCELLED)
