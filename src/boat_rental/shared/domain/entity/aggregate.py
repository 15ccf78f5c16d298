from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 状態遷移はすべて集約ルートのメソッド経由で行う
    - リポジトリは集約ルート単位で保存・取得する
    """
