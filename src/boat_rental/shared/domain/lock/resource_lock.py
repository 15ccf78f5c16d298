from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from ..value_object import ResourceId


class ResourceLock(ABC):
    """ボート単位の排他ロック

    空き状況の検証から予約の保存までを同一ボートについて直列化する。
    取得できない場合は LockAcquisitionException を送出する。
    """

    @abstractmethod
    def acquire(self, resource_id: ResourceId) -> str:
        """ロックを取得し、解放用のトークンを返す"""
        raise NotImplementedError

    @abstractmethod
    def release(self, resource_id: ResourceId, token: str) -> None:
        """取得済みのロックを解放する"""
        raise NotImplementedError

    @contextmanager
    def hold(self, resource_id: ResourceId) -> Iterator[None]:
        """with 文でクリティカルセクションを表現する"""
        token = self.acquire(resource_id)
        try:
            yield
        finally:
            self.release(resource_id, token)
