from abc import abstractmethod

from boat_rental.booking.domain.value_object import BookingId
from boat_rental.payment.domain.entity import Payment
from boat_rental.payment.domain.enum import PaymentStatus
from boat_rental.payment.domain.value_object import PaymentId
from boat_rental.shared.domain import Repository


class PaymentRepository(Repository[Payment, PaymentId]):
    """決済リポジトリのインターフェース"""

    @abstractmethod
    def save(self, payment: Payment) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_transaction_id(self, transaction_id: str) -> Payment | None:
        """ゲートウェイのトランザクションIDで検索する（Webhook 用）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_id(self, booking_id: BookingId) -> list[Payment]:
        """予約に紐づく決済を新しい順に返す"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, payment: Payment, expected_status: PaymentStatus | None = None
    ) -> None:
        """決済を更新する

        expected_status を指定した場合、保存済みのステータスが一致しなければ
        OptimisticLockException を送出する。
        """
        raise NotImplementedError
