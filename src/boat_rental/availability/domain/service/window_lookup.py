from collections.abc import Iterable

from boat_rental.availability.domain.entity import AvailabilityWindow
from boat_rental.shared.domain import TimePeriod


def find_containing_window(
    windows: Iterable[AvailabilityWindow], period: TimePeriod
) -> AvailabilityWindow | None:
    """期間を単独で完全に含む空き枠を返す

    隣接する複数の枠にまたがる期間は含まれるとみなさない。
    """
    for window in windows:
        if window.covers(period):
            return window
    return None
