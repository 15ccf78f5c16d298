from boat_rental.availability.domain import (
    AvailabilityRepository,
    AvailabilityWindow,
    find_containing_window,
)
from boat_rental.booking.domain.entity import Booking
from boat_rental.booking.domain.repository import BookingRepository
from boat_rental.shared.domain import Failure


class AvailabilityValidator:
    """候補予約が成立しうるかを検証する

    1. 最低利用時間（4時間）
    2. 単一の空き枠に完全に収まること
    3. キャンセル済み以外の既存予約と重複しないこと

    成功時は予約期間を含む空き枠を返し、料金計算で再利用する。
    """

    def __init__(
        self,
        availability: AvailabilityRepository,
        bookings: BookingRepository,
    ) -> None:
        self._availability = availability
        self._bookings = bookings

    def validate(self, candidate: Booking) -> AvailabilityWindow | Failure:
        if not candidate.has_valid_duration():
            return Failure.validation("Minimum booking duration is 4 hours")

        windows = self._availability.find_overlapping(
            candidate.resource_id, candidate.period
        )
        if not windows:
            return Failure.validation(
                "No availability for this boat in the selected period"
            )
        window = find_containing_window(windows, candidate.period)
        if window is None:
            return Failure.validation(
                "Booking period doesn't match boat availability"
            )

        conflicts = self._bookings.find_conflicting(
            candidate.resource_id, candidate.period
        )
        if conflicts:
            first = conflicts[0]
            return Failure.conflict(
                "Boat is already booked in the selected period",
                booking_id=str(first.id),
                start_time=first.period.start_iso(),
                end_time=first.period.end_iso(),
            )
        return window
