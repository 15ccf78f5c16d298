from datetime import datetime, timedelta, timezone

from boat_rental.booking.domain.enum import BookingStatus
from boat_rental.booking.domain.value_object import BookingId
from boat_rental.shared.domain import (
    AggregateRoot,
    Money,
    ResourceId,
    TimePeriod,
    UserId,
)
from boat_rental.shared.domain.exception import BusinessRuleViolationException

MINIMUM_BOOKING_DURATION = timedelta(hours=4)


class Booking(AggregateRoot[BookingId]):
    """ボートの貸し出し予約"""

    def __init__(
        self,
        id: BookingId,
        renter_id: UserId,
        resource_id: ResourceId,
        period: TimePeriod,
        total_price: Money,
        status: BookingStatus = BookingStatus.PENDING,
        created_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        self._renter_id = renter_id
        self._resource_id = resource_id
        self._period = period
        self._total_price = total_price
        self._status = status
        self._created_at = created_at or datetime.now(timezone.utc)

    @property
    def renter_id(self) -> UserId:
        return self._renter_id

    @property
    def resource_id(self) -> ResourceId:
        return self._resource_id

    @property
    def period(self) -> TimePeriod:
        return self._period

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def has_valid_duration(self) -> bool:
        """最低利用時間（4時間）を満たすか"""
        return self._period.duration >= MINIMUM_BOOKING_DURATION

    def overlaps_with(self, period: TimePeriod) -> bool:
        return self._period.overlaps(period)

    def blocks_calendar(self) -> bool:
        """キャンセル済み以外の予約は期間を占有する"""
        return self._status != BookingStatus.CANCELLED

    def assign_price(self, price: Money) -> None:
        """料金を設定する（PENDING の間のみ）"""
        if self._status != BookingStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot change total price of a {self._status.value} booking"
            )
        self._total_price = price

    def confirm(self) -> None:
        """予約を確定する"""
        if self._status != BookingStatus.PENDING:
            raise BusinessRuleViolationException(
                "Only pending bookings can be confirmed"
            )
        self._status = BookingStatus.CONFIRMED

    def finish(self) -> None:
        """利用完了にする（運用側の操作）"""
        if self._status != BookingStatus.CONFIRMED:
            raise BusinessRuleViolationException(
                "Only confirmed bookings can be finished"
            )
        self._status = BookingStatus.FINISHED

    def cancel(self) -> None:
        """予約をキャンセルする"""
        if self._status == BookingStatus.CANCELLED:
            return
        if self._status == BookingStatus.FINISHED:
            raise BusinessRuleViolationException("Cannot cancel a finished booking")
        self._status = BookingStatus.CANCELLED
