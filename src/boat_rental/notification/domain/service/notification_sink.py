from abc import ABC, abstractmethod

from boat_rental.booking.domain.value_object import BookingId
from boat_rental.notification.domain.enum import NotificationRole


class NotificationSink(ABC):
    """予約に関する通知の送り先（配信方法は実装に委ねる）"""

    @abstractmethod
    def notify(self, booking_id: BookingId, role: NotificationRole) -> None:
        raise NotImplementedError
