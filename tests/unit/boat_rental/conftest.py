import copy
import os
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("TABLE_NAME", "boat-rental-test")
os.environ.setdefault("WEBHOOK_SECRET", "test-webhook-secret")

from boat_rental.availability.domain import (  # noqa: E402
    AvailabilityId,
    AvailabilityRepository,
    AvailabilityWindow,
    PriceCalculator,
)
from boat_rental.booking.applications import BookingOrchestrator  # noqa: E402
from boat_rental.booking.domain import (  # noqa: E402
    AvailabilityValidator,
    Booking,
    BookingId,
    BookingRepository,
    BookingStatus,
)
from boat_rental.payment.applications import PaymentOrchestrator  # noqa: E402
from boat_rental.payment.domain import (  # noqa: E402
    CardData,
    Payment,
    PaymentId,
    PaymentRepository,
    PaymentStatus,
)
from boat_rental.payment.infrastructure import PaymentGatewaySimulator  # noqa: E402
from boat_rental.shared.domain import (  # noqa: E402
    Currency,
    DuplicateResourceException,
    Money,
    OptimisticLockException,
    Resource,
    ResourceId,
    ResourceLookup,
    TimePeriod,
    User,
    UserId,
    UserLookup,
)
from boat_rental.shared.infrastructure import InMemoryResourceLock  # noqa: E402

DAY1 = datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)
DAY2 = DAY1 + timedelta(days=1)

APPROVED_CARD = "4111111111111111"
DECLINED_CARD = "4222222222222222"
PENDING_CARD = "4333333333333333"


class InMemoryAvailabilityRepository(AvailabilityRepository):
    def __init__(self) -> None:
        self.windows: dict[AvailabilityId, AvailabilityWindow] = {}

    def save(self, window: AvailabilityWindow) -> None:
        self.windows[window.id] = window

    def find_by_id(self, window_id: AvailabilityId) -> AvailabilityWindow | None:
        return self.windows.get(window_id)

    def find_by_resource_id(self, resource_id: ResourceId) -> list[AvailabilityWindow]:
        return sorted(
            (w for w in self.windows.values() if w.resource_id == resource_id),
            key=lambda w: w.period.start,
        )

    def find_overlapping(
        self, resource_id: ResourceId, period: TimePeriod
    ) -> list[AvailabilityWindow]:
        return [w for w in self.find_by_resource_id(resource_id) if w.overlaps(period)]

    def delete(self, window: AvailabilityWindow) -> None:
        self.windows.pop(window.id, None)


class InMemoryBookingRepository(BookingRepository):
    """保存時・取得時にコピーを取り、DynamoDB と同じく値で保持する"""

    def __init__(self) -> None:
        self.bookings: dict[BookingId, Booking] = {}

    def save(self, booking: Booking) -> None:
        if booking.id in self.bookings:
            raise DuplicateResourceException(f"Booking already exists: {booking.id}")
        self.bookings[booking.id] = copy.deepcopy(booking)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        booking = self.bookings.get(booking_id)
        return copy.deepcopy(booking) if booking else None

    def find_conflicting(
        self, resource_id: ResourceId, period: TimePeriod
    ) -> list[Booking]:
        return sorted(
            (
                copy.deepcopy(b)
                for b in self.bookings.values()
                if b.resource_id == resource_id
                and b.blocks_calendar()
                and b.overlaps_with(period)
            ),
            key=lambda b: b.period.start,
        )

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        stored = self.bookings[booking.id]
        if expected_status is not None and stored.status != expected_status:
            raise OptimisticLockException(f"Booking status conflict: {booking.id}")
        self.bookings[booking.id] = copy.deepcopy(booking)


class InMemoryPaymentRepository(PaymentRepository):
    def __init__(self) -> None:
        self.payments: dict[PaymentId, Payment] = {}

    def save(self, payment: Payment) -> None:
        if payment.id in self.payments:
            raise DuplicateResourceException(f"Payment already exists: {payment.id}")
        self.payments[payment.id] = copy.deepcopy(payment)

    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        payment = self.payments.get(payment_id)
        return copy.deepcopy(payment) if payment else None

    def find_by_transaction_id(self, transaction_id: str) -> Payment | None:
        for payment in self.payments.values():
            if payment.transaction_id == transaction_id:
                return copy.deepcopy(payment)
        return None

    def find_by_booking_id(self, booking_id: BookingId) -> list[Payment]:
        matches = [p for p in self.payments.values() if p.booking_id == booking_id]
        return [
            copy.deepcopy(p)
            for p in sorted(matches, key=lambda p: p.created_at, reverse=True)
        ]

    def update(
        self, payment: Payment, expected_status: PaymentStatus | None = None
    ) -> None:
        stored = self.payments[payment.id]
        if expected_status is not None and stored.status != expected_status:
            raise OptimisticLockException(f"Payment status conflict: {payment.id}")
        self.payments[payment.id] = copy.deepcopy(payment)


class InMemoryUserLookup(UserLookup):
    def __init__(self, *users: User) -> None:
        self._users = {user.id: user for user in users}

    def find_by_id(self, user_id: UserId) -> User | None:
        return self._users.get(user_id)


class InMemoryResourceLookup(ResourceLookup):
    def __init__(self, *resources: Resource) -> None:
        self._resources = {resource.id: resource for resource in resources}

    def find_by_id(self, resource_id: ResourceId) -> Resource | None:
        return self._resources.get(resource_id)


@dataclass
class FakeLambdaContext:
    function_name: str = "boat-rental-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:us-east-1:123456789012:function:boat-rental-test"
    )
    aws_request_id: str = "request-123"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def resource_id():
    return ResourceId(value="boat-1")


@pytest.fixture
def renter_id():
    return UserId(value="renter-1")


@pytest.fixture
def owner_id():
    return UserId(value="owner-1")


@pytest.fixture
def create_window(resource_id):
    """AvailabilityWindow を生成する Factory fixture"""

    def _factory(
        start: datetime = DAY1,
        end: datetime = DAY1 + timedelta(days=30),
        price_per_hour: Decimal = Decimal("250"),
        window_id: str = "window-1",
        resource: ResourceId = resource_id,
    ) -> AvailabilityWindow:
        return AvailabilityWindow(
            id=AvailabilityId(value=window_id),
            resource_id=resource,
            period=TimePeriod(start=start, end=end),
            price_per_hour=Money(amount=price_per_hour, currency=Currency.brl()),
        )

    return _factory


@pytest.fixture
def create_booking(resource_id, renter_id):
    """Booking を生成する Factory fixture"""

    def _factory(
        start: datetime = DAY2.replace(hour=10),
        end: datetime = DAY2.replace(hour=14),
        status: BookingStatus = BookingStatus.PENDING,
        booking_id: str = "booking-1",
        total_price: Decimal = Decimal("0"),
        resource: ResourceId = resource_id,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            renter_id=renter_id,
            resource_id=resource,
            period=TimePeriod(start=start, end=end),
            total_price=Money(amount=total_price, currency=Currency.brl()),
            status=status,
        )

    return _factory


@pytest.fixture
def create_card():
    def _factory(
        number: str = APPROVED_CARD,
        holder_name: str = "Maria Silva",
        expiration: str = "12/30",
        cvv: str = "123",
    ) -> CardData:
        return CardData(
            number=number, holder_name=holder_name, expiration=expiration, cvv=cvv
        )

    return _factory


@pytest.fixture
def availability_repository():
    return InMemoryAvailabilityRepository()


@pytest.fixture
def booking_repository():
    return InMemoryBookingRepository()


@pytest.fixture
def payment_repository():
    return InMemoryPaymentRepository()


@pytest.fixture
def users(renter_id, owner_id):
    return InMemoryUserLookup(
        User(id=renter_id, email="renter@example.com"),
        User(id=owner_id, email="owner@example.com"),
    )


@pytest.fixture
def resources(resource_id, owner_id):
    return InMemoryResourceLookup(
        Resource(id=resource_id, owner_id=owner_id, name="Sea Breeze")
    )


@pytest.fixture
def gateway():
    return PaymentGatewaySimulator(rng=random.Random(42))


@pytest.fixture
def payment_orchestrator(payment_repository, gateway):
    return PaymentOrchestrator(
        repository=payment_repository, gateway=gateway, timeout_seconds=None
    )


@pytest.fixture
def notifications():
    """通知先のモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def booking_orchestrator(
    users,
    resources,
    availability_repository,
    booking_repository,
    payment_orchestrator,
    notifications,
):
    return BookingOrchestrator(
        users=users,
        resources=resources,
        validator=AvailabilityValidator(availability_repository, booking_repository),
        price_calculator=PriceCalculator(),
        payments=payment_orchestrator,
        bookings=booking_repository,
        lock=InMemoryResourceLock(wait_seconds=1.0),
        notifications=notifications,
    )
