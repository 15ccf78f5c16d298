from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..value_object import UserId


@dataclass(frozen=True)
class User:
    """予約処理が必要とするユーザー情報のみを持つ値"""

    id: UserId
    email: str


class UserLookup(ABC):
    """ユーザー管理（外部コラボレータ）への参照"""

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        raise NotImplementedError
