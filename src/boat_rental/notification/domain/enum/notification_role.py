from enum import Enum


class NotificationRole(str, Enum):
    """通知の宛先・種類"""

    OWNER = "OWNER"
    RENTER = "RENTER"
    CANCELLATION = "CANCELLATION"
