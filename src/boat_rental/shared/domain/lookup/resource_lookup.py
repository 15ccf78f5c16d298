from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..value_object import ResourceId, UserId


@dataclass(frozen=True)
class Resource:
    """予約処理が必要とするボート情報のみを持つ値"""

    id: ResourceId
    owner_id: UserId
    name: str = ""


class ResourceLookup(ABC):
    """ボート管理（外部コラボレータ）への参照"""

    @abstractmethod
    def find_by_id(self, resource_id: ResourceId) -> Resource | None:
        raise NotImplementedError
