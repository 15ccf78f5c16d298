from abc import abstractmethod

from boat_rental.booking.domain.entity import Booking
from boat_rental.booking.domain.enum import BookingStatus
from boat_rental.booking.domain.value_object import BookingId
from boat_rental.shared.domain import Repository, ResourceId, TimePeriod


class BookingRepository(Repository[Booking, BookingId]):
    """予約リポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規の予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_conflicting(
        self, resource_id: ResourceId, period: TimePeriod
    ) -> list[Booking]:
        """期間が重なるキャンセル済み以外の予約を開始時刻順で返す"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する

        expected_status を指定した場合、保存済みのステータスが一致しなければ
        OptimisticLockException を送出する。
        """
        raise NotImplementedError
