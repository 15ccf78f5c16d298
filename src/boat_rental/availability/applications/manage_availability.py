from aws_lambda_powertools import Logger

from boat_rental.availability.domain import (
    AvailabilityId,
    AvailabilityRepository,
    AvailabilityWindow,
    AvailabilityWindowFactory,
    WindowDetails,
)
from boat_rental.shared.domain import (
    BusinessRuleViolationException,
    Failure,
    LockAcquisitionException,
    ResourceId,
    ResourceLock,
    ResourceLookup,
)

logger = Logger(child=True)


class ManageAvailabilityService:
    """オーナーによる空き枠管理のユースケース

    同一ボートの空き枠同士の重複は登録時に拒否する。
    これにより、ある予約期間を含む空き枠は高々1つに定まる。
    重複確認と保存は予約作成と同じボート単位のロック内で行う。
    """

    def __init__(
        self,
        repository: AvailabilityRepository,
        factory: AvailabilityWindowFactory,
        resources: ResourceLookup,
        lock: ResourceLock,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._resources = resources
        self._lock = lock

    def create(
        self, resource_id: ResourceId, window_details: WindowDetails
    ) -> AvailabilityWindow | Failure:
        """空き枠を登録する"""
        if self._resources.find_by_id(resource_id) is None:
            return Failure.not_found(f"Boat not found with id: {resource_id}")

        try:
            window = self._factory.create(resource_id, window_details)
        except (ValueError, BusinessRuleViolationException) as e:
            return Failure.validation(str(e))

        try:
            with self._lock.hold(resource_id):
                overlapping = self._repository.find_overlapping(
                    resource_id, window.period
                )
                if overlapping:
                    existing = overlapping[0]
                    return Failure.conflict(
                        "Availability window overlaps an existing window",
                        window_id=str(existing.id),
                        start_time=existing.period.start_iso(),
                        end_time=existing.period.end_iso(),
                    )
                self._repository.save(window)
        except LockAcquisitionException as e:
            logger.warning(
                "Could not lock boat for availability",
                extra={"resource_id": str(resource_id), "error": str(e)},
            )
            return Failure.conflict(
                "Boat is busy with another request, try again",
                resource_id=str(resource_id),
            )

        logger.info(
            "Availability window created",
            extra={"resource_id": str(resource_id), "window_id": str(window.id)},
        )
        return window

    def list_for_resource(self, resource_id: ResourceId) -> list[AvailabilityWindow]:
        """ボートの空き枠一覧を返す"""
        return self._repository.find_by_resource_id(resource_id)

    def delete(self, window_id: AvailabilityId) -> AvailabilityWindow | Failure:
        """空き枠を削除する"""
        window = self._repository.find_by_id(window_id)
        if window is None:
            return Failure.not_found(f"Availability not found with id: {window_id}")
        self._repository.delete(window)
        logger.info("Availability window deleted", extra={"window_id": str(window_id)})
        return window
