from decimal import Decimal
from typing import TypedDict

from boat_rental.availability.domain.entity import AvailabilityWindow
from boat_rental.availability.domain.value_object import AvailabilityId
from boat_rental.shared.domain import Currency, Money, ResourceId, TimePeriod


class WindowDetails(TypedDict):
    """空き枠の入力データ構造"""

    start_time: str
    end_time: str
    price_per_hour: Decimal
    currency: str


class AvailabilityWindowFactory:
    """空き枠エンティティのファクトリ"""

    def create(
        self, resource_id: ResourceId, window_details: WindowDetails
    ) -> AvailabilityWindow:
        """プリミティブ型から新規の空き枠を生成する"""
        period = TimePeriod.from_iso(
            window_details["start_time"], window_details["end_time"]
        )
        price_per_hour = Money(
            amount=window_details["price_per_hour"],
            currency=Currency(window_details["currency"]),
        )
        return AvailabilityWindow(
            id=AvailabilityId.generate(),
            resource_id=resource_id,
            period=period,
            price_per_hour=price_per_hour,
        )
