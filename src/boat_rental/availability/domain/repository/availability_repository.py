from abc import abstractmethod

from boat_rental.availability.domain.entity import AvailabilityWindow
from boat_rental.availability.domain.value_object import AvailabilityId
from boat_rental.shared.domain import Repository, ResourceId, TimePeriod


class AvailabilityRepository(Repository[AvailabilityWindow, AvailabilityId]):
    """空き枠リポジトリのインターフェース"""

    @abstractmethod
    def save(self, window: AvailabilityWindow) -> None:
        """空き枠を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, window_id: AvailabilityId) -> AvailabilityWindow | None:
        """空き枠IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_resource_id(self, resource_id: ResourceId) -> list[AvailabilityWindow]:
        """ボートの全空き枠を開始時刻順で返す"""
        raise NotImplementedError

    @abstractmethod
    def find_overlapping(
        self, resource_id: ResourceId, period: TimePeriod
    ) -> list[AvailabilityWindow]:
        """期間と重なる空き枠を返す（該当なしは空リスト）"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, window: AvailabilityWindow) -> None:
        """空き枠を削除する"""
        raise NotImplementedError
