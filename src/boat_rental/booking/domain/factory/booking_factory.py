from boat_rental.booking.domain.entity import Booking
from boat_rental.booking.domain.enum import BookingStatus
from boat_rental.booking.domain.value_object import BookingId
from boat_rental.shared.domain import Currency, Money, ResourceId, TimePeriod, UserId


class BookingFactory:
    """予約エンティティのファクトリ

    - 料金確定前の候補予約（PENDING、料金0）を生成する
    """

    def __init__(self, currency: Currency | None = None) -> None:
        self._currency = currency or Currency.brl()

    def create_candidate(
        self, renter_id: UserId, resource_id: ResourceId, period: TimePeriod
    ) -> Booking:
        """検証前の候補予約を生成する"""
        return Booking(
            id=BookingId.generate(),
            renter_id=renter_id,
            resource_id=resource_id,
            period=period,
            total_price=Money.zero(self._currency),
            status=BookingStatus.PENDING,
        )
