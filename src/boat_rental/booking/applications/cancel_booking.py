from aws_lambda_powertools import Logger

from boat_rental.booking.domain import (
    Booking,
    BookingId,
    BookingRepository,
    BookingStatus,
)
from boat_rental.notification.applications import notify_parties
from boat_rental.notification.domain import NotificationRole, NotificationSink
from boat_rental.shared.domain import (
    BusinessRuleViolationException,
    Failure,
    OptimisticLockException,
)

logger = Logger(child=True)


class CancelBookingService:
    """予約キャンセルユースケース

    - PENDING / CONFIRMED の予約のみキャンセル可能
    - キャンセル済みの予約に対しては何もせず成功を返す（冪等）
    - 返金は扱わない
    """

    def __init__(
        self, repository: BookingRepository, notifications: NotificationSink
    ) -> None:
        self._repository = repository
        self._notifications = notifications

    def cancel(self, booking_id: BookingId) -> Booking | Failure:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            return Failure.not_found(f"Booking not found with id: {booking_id}")
        if booking.status == BookingStatus.CANCELLED:
            logger.info(
                "Booking already cancelled", extra={"booking_id": str(booking_id)}
            )
            return booking

        previous_status = booking.status
        try:
            booking.cancel()
        except BusinessRuleViolationException as e:
            return Failure.conflict(str(e), status=previous_status.value)

        try:
            self._repository.update(booking, expected_status=previous_status)
        except OptimisticLockException:
            logger.warning(
                "Booking status changed during cancellation",
                extra={"booking_id": str(booking_id)},
            )
            return Failure.conflict(
                "Booking was modified concurrently, try again",
                booking_id=str(booking_id),
            )

        logger.info(
            "Booking cancelled",
            extra={"booking_id": str(booking_id), "previous_status": previous_status.value},
        )
        notify_parties(self._notifications, booking.id, (NotificationRole.CANCELLATION,))
        return booking
