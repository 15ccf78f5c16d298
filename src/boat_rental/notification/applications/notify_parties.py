from collections.abc import Iterable

from aws_lambda_powertools import Logger

from boat_rental.booking.domain.value_object import BookingId
from boat_rental.notification.domain import NotificationRole, NotificationSink

logger = Logger(child=True)


def notify_parties(
    sink: NotificationSink,
    booking_id: BookingId,
    roles: Iterable[NotificationRole],
) -> None:
    """通知を送る（失敗しても呼び出し元の処理は巻き戻さない）"""
    for role in roles:
        try:
            sink.notify(booking_id, role)
        except Exception:
            logger.exception(
                "Failed to send booking notification",
                extra={"booking_id": str(booking_id), "role": role.value},
            )
