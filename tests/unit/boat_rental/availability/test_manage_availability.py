import threading
import time
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from boat_rental.availability.applications import ManageAvailabilityService
from boat_rental.availability.domain import (
    AvailabilityId,
    AvailabilityWindow,
    AvailabilityWindowFactory,
    WindowDetails,
)
from boat_rental.shared.domain import (
    ErrorKind,
    Failure,
    LockAcquisitionException,
    ResourceId,
)
from boat_rental.shared.infrastructure import InMemoryResourceLock


def details(start: str, end: str, price: str = "250") -> WindowDetails:
    return {
        "start_time": start,
        "end_time": end,
        "price_per_hour": Decimal(price),
        "currency": "BRL",
    }


class TestManageAvailabilityService:
    @pytest.fixture
    def service(self, availability_repository, resources):
        return ManageAvailabilityService(
            repository=availability_repository,
            factory=AvailabilityWindowFactory(),
            resources=resources,
            lock=InMemoryResourceLock(),
        )

    def test_create_saves_window(self, service, availability_repository, resource_id):
        result = service.create(
            resource_id, details("2025-01-01T08:00:00Z", "2025-01-31T08:00:00Z")
        )

        assert isinstance(result, AvailabilityWindow)
        assert result.price_per_hour.amount == Decimal("250.00")
        assert availability_repository.find_by_id(result.id) is result

    def test_unknown_boat_is_not_found(self, service):
        result = service.create(
            ResourceId(value="ghost"),
            details("2025-01-01T08:00:00Z", "2025-01-31T08:00:00Z"),
        )

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.NOT_FOUND

    def test_inverted_period_is_validation_error(self, service, resource_id):
        result = service.create(
            resource_id, details("2025-01-31T08:00:00Z", "2025-01-01T08:00:00Z")
        )

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.VALIDATION_ERROR

    def test_zero_price_is_validation_error(self, service, resource_id):
        result = service.create(
            resource_id,
            details("2025-01-01T08:00:00Z", "2025-01-31T08:00:00Z", price="0"),
        )

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.VALIDATION_ERROR

    def test_overlapping_window_is_conflict(self, service, resource_id):
        service.create(resource_id, details("2025-01-01T08:00:00Z", "2025-01-10T08:00:00Z"))

        result = service.create(
            resource_id, details("2025-01-05T08:00:00Z", "2025-01-20T08:00:00Z")
        )

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.CONFLICT
        assert "window_id" in result.details

    def test_touching_windows_are_allowed(self, service, resource_id):
        service.create(resource_id, details("2025-01-01T08:00:00Z", "2025-01-10T08:00:00Z"))

        result = service.create(
            resource_id, details("2025-01-10T08:00:00Z", "2025-01-20T08:00:00Z", "300")
        )

        assert isinstance(result, AvailabilityWindow)
        assert len(service.list_for_resource(resource_id)) == 2

    def test_delete_removes_window(self, service, availability_repository, resource_id):
        window = service.create(
            resource_id, details("2025-01-01T08:00:00Z", "2025-01-10T08:00:00Z")
        )

        result = service.delete(window.id)

        assert result == window
        assert availability_repository.find_by_id(window.id) is None

    def test_delete_unknown_window_is_not_found(self, service):
        result = service.delete(AvailabilityId(value="missing"))

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.NOT_FOUND

    def test_busy_boat_is_conflict(
        self, availability_repository, resources, resource_id
    ):
        lock = MagicMock()
        lock.hold.side_effect = LockAcquisitionException("Resource is busy: boat-1")
        service = ManageAvailabilityService(
            repository=availability_repository,
            factory=AvailabilityWindowFactory(),
            resources=resources,
            lock=lock,
        )

        result = service.create(
            resource_id, details("2025-01-01T08:00:00Z", "2025-01-10T08:00:00Z")
        )

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.CONFLICT
        assert availability_repository.windows == {}


class TestConcurrentAvailability:
    def test_only_one_of_two_overlapping_windows_is_saved(
        self, availability_repository, resources, resource_id, monkeypatch
    ):
        find_overlapping = availability_repository.find_overlapping

        def slow_find_overlapping(*args):
            found = find_overlapping(*args)
            time.sleep(0.05)
            return found

        monkeypatch.setattr(
            availability_repository, "find_overlapping", slow_find_overlapping
        )
        service = ManageAvailabilityService(
            repository=availability_repository,
            factory=AvailabilityWindowFactory(),
            resources=resources,
            lock=InMemoryResourceLock(wait_seconds=5.0),
        )
        barrier = threading.Barrier(2)
        results = []

        def publish(start: str, end: str) -> None:
            barrier.wait()
            results.append(service.create(resource_id, details(start, end)))

        threads = [
            threading.Thread(target=publish, args=args)
            for args in (
                ("2025-01-01T08:00:00Z", "2025-01-10T08:00:00Z"),
                ("2025-01-05T08:00:00Z", "2025-01-20T08:00:00Z"),
            )
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        created = [r for r in results if isinstance(r, AvailabilityWindow)]
        conflicts = [r for r in results if isinstance(r, Failure)]
        assert len(created) == 1
        assert [f.kind for f in conflicts] == [ErrorKind.CONFLICT]
        assert len(availability_repository.windows) == 1
