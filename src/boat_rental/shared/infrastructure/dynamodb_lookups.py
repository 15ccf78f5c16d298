from boat_rental.shared.domain.lookup import Resource, ResourceLookup, User, UserLookup
from boat_rental.shared.domain.value_object import ResourceId, UserId

from .dynamodb import resolve_table


class DynamoDBUserLookup(UserLookup):
    """ユーザー管理サービスが書き込んだ USER# アイテムを参照する"""

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = resolve_table(table_name, table)

    def find_by_id(self, user_id: UserId) -> User | None:
        response = self.table.get_item(
            Key={"PK": f"USER#{user_id}", "SK": "PROFILE"},
        )
        item = response.get("Item")
        if not item:
            return None
        return User(id=UserId(value=item["user_id"]), email=item["email"])


class DynamoDBResourceLookup(ResourceLookup):
    """ボート管理サービスが書き込んだ BOAT# アイテムを参照する"""

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = resolve_table(table_name, table)

    def find_by_id(self, resource_id: ResourceId) -> Resource | None:
        response = self.table.get_item(
            Key={"PK": f"BOAT#{resource_id}", "SK": "PROFILE"},
        )
        item = response.get("Item")
        if not item:
            return None
        return Resource(
            id=ResourceId(value=item["resource_id"]),
            owner_id=UserId(value=item["owner_id"]),
            name=item.get("name", ""),
        )
