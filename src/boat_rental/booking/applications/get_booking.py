from boat_rental.booking.domain import Booking, BookingId, BookingRepository
from boat_rental.shared.domain import Failure


class GetBookingService:
    """予約照会ユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def get(self, booking_id: BookingId) -> Booking | Failure:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            return Failure.not_found(f"Booking not found with id: {booking_id}")
        return booking
