from dataclasses import dataclass
from datetime import datetime

from aws_lambda_powertools import Logger

from boat_rental.availability.domain import PriceCalculator
from boat_rental.booking.domain import (
    MINIMUM_BOOKING_DURATION,
    AvailabilityValidator,
    Booking,
    BookingFactory,
    BookingRepository,
)
from boat_rental.notification.applications import notify_parties
from boat_rental.notification.domain import NotificationRole, NotificationSink
from boat_rental.payment.applications import (
    PaymentErrorKind,
    PaymentOrchestrator,
    PaymentResult,
)
from boat_rental.payment.domain import CardData, PaymentInput, PaymentMethod
from boat_rental.shared.domain import (
    Failure,
    LockAcquisitionException,
    ResourceId,
    ResourceLock,
    ResourceLookup,
    TimePeriod,
    User,
    UserId,
    UserLookup,
)

logger = Logger(child=True)


@dataclass(frozen=True)
class CreateBookingCommand:
    """予約作成の入力"""

    renter_id: UserId
    resource_id: ResourceId
    start_time: datetime
    end_time: datetime
    payment_method: PaymentMethod
    card: CardData | None = None
    installments: int = 1


class BookingOrchestrator:
    """予約作成のサガ

    期間チェック → 借り手・ボート解決 → (ボート単位のロック内で)
    空き状況検証 → 料金計算 → 決済 → 保存 → 通知。
    どの段階の失敗も Failure として返し、以降の段階は実行しない。
    """

    def __init__(
        self,
        users: UserLookup,
        resources: ResourceLookup,
        validator: AvailabilityValidator,
        price_calculator: PriceCalculator,
        payments: PaymentOrchestrator,
        bookings: BookingRepository,
        lock: ResourceLock,
        notifications: NotificationSink,
        factory: BookingFactory | None = None,
    ) -> None:
        self._users = users
        self._resources = resources
        self._validator = validator
        self._price_calculator = price_calculator
        self._payments = payments
        self._bookings = bookings
        self._lock = lock
        self._notifications = notifications
        self._factory = factory or BookingFactory()

    def create_booking(self, command: CreateBookingCommand) -> Booking | Failure:
        """予約を作成する（例外は送出しない）"""
        try:
            return self._create(command)
        except Exception:
            logger.exception(
                "Unexpected error while creating booking",
                extra={"resource_id": str(command.resource_id)},
            )
            return Failure.system("Unexpected error while creating booking")

    def _create(self, command: CreateBookingCommand) -> Booking | Failure:
        try:
            period = TimePeriod(start=command.start_time, end=command.end_time)
        except ValueError as e:
            return Failure.validation(str(e))
        if period.duration < MINIMUM_BOOKING_DURATION:
            return Failure.validation("Minimum booking duration is 4 hours")

        renter = self._users.find_by_id(command.renter_id)
        if renter is None:
            return Failure.not_found(f"User not found with id: {command.renter_id}")
        resource = self._resources.find_by_id(command.resource_id)
        if resource is None:
            return Failure.not_found(f"Boat not found with id: {command.resource_id}")

        booking = self._factory.create_candidate(renter.id, resource.id, period)
        try:
            with self._lock.hold(resource.id):
                result = self._reserve(booking, renter, command)
        except LockAcquisitionException as e:
            logger.warning(
                "Could not lock boat for booking",
                extra={"resource_id": str(resource.id), "error": str(e)},
            )
            return Failure.conflict(
                "Boat is busy with another booking, try again",
                resource_id=str(resource.id),
            )
        if isinstance(result, Failure):
            return result

        notify_parties(
            self._notifications,
            result.id,
            (NotificationRole.OWNER, NotificationRole.RENTER),
        )
        return result

    def _reserve(
        self, booking: Booking, renter: User, command: CreateBookingCommand
    ) -> Booking | Failure:
        """クリティカルセクション：検証から保存まで"""
        window = self._validator.validate(booking)
        if isinstance(window, Failure):
            logger.info(
                "Booking rejected",
                extra={"resource_id": str(booking.resource_id), "reason": window.message},
            )
            return window

        booking.assign_price(self._price_calculator.calculate(window, booking.period))

        payment = self._payments.process(
            PaymentInput(
                amount=booking.total_price.amount,
                currency=str(booking.total_price.currency),
                payment_method=command.payment_method,
                booking_id=booking.id,
                card=command.card,
                user_email=renter.email,
                description=f"Boat rental {booking.resource_id} ({booking.period})",
                installments=command.installments,
            )
        )
        if payment.error_kind == PaymentErrorKind.VALIDATION_ERROR:
            return Failure.validation(payment.message)
        if payment.is_pending:
            self._bookings.save(booking)
            logger.info(
                "Booking awaiting payment confirmation",
                extra=self._log_context(booking, payment),
            )
            return booking
        if not payment.success:
            logger.info("Booking payment failed", extra=self._log_context(booking, payment))
            return Failure.payment(
                payment.message,
                payment_status=payment.status.value,
                transaction_id=payment.transaction_id,
            )

        booking.confirm()
        self._bookings.save(booking)
        logger.info("Booking confirmed", extra=self._log_context(booking, payment))
        return booking

    @staticmethod
    def _log_context(booking: Booking, payment: PaymentResult) -> dict:
        return {
            "booking_id": str(booking.id),
            "resource_id": str(booking.resource_id),
            "booking_status": booking.status.value,
            "payment_status": payment.status.value,
            "transaction_id": payment.transaction_id,
        }
