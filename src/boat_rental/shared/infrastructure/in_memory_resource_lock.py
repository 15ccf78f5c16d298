import threading
import uuid

from boat_rental.shared.domain.exception import LockAcquisitionException
from boat_rental.shared.domain.lock import ResourceLock
from boat_rental.shared.domain.value_object import ResourceId


class InMemoryResourceLock(ResourceLock):
    """プロセス内のボート単位ロック（ローカル実行・テスト用）"""

    def __init__(self, wait_seconds: float = 5.0) -> None:
        self._wait_seconds = wait_seconds
        self._guard = threading.Lock()
        self._locks: dict[ResourceId, threading.Lock] = {}
        self._owners: dict[ResourceId, str] = {}

    def acquire(self, resource_id: ResourceId) -> str:
        with self._guard:
            lock = self._locks.setdefault(resource_id, threading.Lock())
        if not lock.acquire(timeout=self._wait_seconds):
            raise LockAcquisitionException(f"Resource is busy: {resource_id}")
        token = uuid.uuid4().hex
        self._owners[resource_id] = token
        return token

    def release(self, resource_id: ResourceId, token: str) -> None:
        if self._owners.get(resource_id) != token:
            return
        del self._owners[resource_id]
        self._locks[resource_id].release()
