from aws_lambda_powertools import Logger

from boat_rental.booking.domain.value_object import BookingId
from boat_rental.notification.domain import NotificationRole, NotificationSink

logger = Logger(child=True)


class LoggingNotificationSink(NotificationSink):
    """通知内容をログに出力するだけの実装"""

    def notify(self, booking_id: BookingId, role: NotificationRole) -> None:
        logger.info(
            "Booking notification",
            extra={"booking_id": str(booking_id), "role": role.value},
        )
