from boat_rental.availability.domain.entity import AvailabilityWindow
from boat_rental.shared.domain import Money, TimePeriod
from boat_rental.shared.domain.exception import BookingValidationException

MINIMUM_BILLED_HOURS = 4


class PriceCalculator:
    """空き枠の時間単価から料金を算出する

    課金時間 = max(切り捨てた時間数, 4)
    空き枠は AvailabilityValidator が find_containing_window で特定したものを受け取る。
    """

    def calculate(self, window: AvailabilityWindow, period: TimePeriod) -> Money:
        """検証済みの空き枠から料金を算出する"""
        if not window.covers(period):
            raise BookingValidationException(
                "Booking period doesn't match boat availability"
            )
        hours = max(period.whole_hours(), MINIMUM_BILLED_HOURS)
        return window.price_per_hour.multiply(hours)
