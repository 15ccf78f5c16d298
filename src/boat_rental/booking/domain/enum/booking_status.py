from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    PENDING -> CONFIRMED -> FINISHED、または CANCELLED へのみ遷移する。
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    FINISHED = "FINISHED"
