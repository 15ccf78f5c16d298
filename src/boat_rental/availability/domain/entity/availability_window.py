from boat_rental.availability.domain.value_object import AvailabilityId
from boat_rental.shared.domain import AggregateRoot, Money, ResourceId, TimePeriod
from boat_rental.shared.domain.exception import BusinessRuleViolationException


class AvailabilityWindow(AggregateRoot[AvailabilityId]):
    """ボートの貸し出し可能期間と時間単価

    予約処理からは読み取り専用。作成・削除はオーナー向けの管理機能のみが行う。
    """

    def __init__(
        self,
        id: AvailabilityId,
        resource_id: ResourceId,
        period: TimePeriod,
        price_per_hour: Money,
    ) -> None:
        super().__init__(id)
        if price_per_hour.is_zero():
            raise BusinessRuleViolationException("Price per hour must be positive")
        self._resource_id = resource_id
        self._period = period
        self._price_per_hour = price_per_hour

    @property
    def resource_id(self) -> ResourceId:
        return self._resource_id

    @property
    def period(self) -> TimePeriod:
        return self._period

    @property
    def price_per_hour(self) -> Money:
        return self._price_per_hour

    def covers(self, period: TimePeriod) -> bool:
        """予約期間がこの枠に完全に収まるか"""
        return self._period.contains(period)

    def overlaps(self, period: TimePeriod) -> bool:
        return self._period.overlaps(period)
