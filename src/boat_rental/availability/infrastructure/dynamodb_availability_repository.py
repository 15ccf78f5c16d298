from decimal import Decimal

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from boat_rental.availability.domain.entity import AvailabilityWindow
from boat_rental.availability.domain.repository import AvailabilityRepository
from boat_rental.availability.domain.value_object import AvailabilityId
from boat_rental.shared.domain import Currency, Money, ResourceId, TimePeriod
from boat_rental.shared.domain.exception import DuplicateResourceException
from boat_rental.shared.infrastructure import (
    from_storage_iso,
    is_conditional_check_failure,
    query_all,
    resolve_table,
    to_storage_iso,
)


class DynamoDBAvailabilityRepository(AvailabilityRepository):
    """DynamoDBを使用したAvailabilityRepository の具象実装

    PK: BOAT#<resource_id> / SK: AVAILABILITY#<start>#<id>
    GSI1: AVAILABILITY#<id> で ID 検索する
    """

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = resolve_table(table_name, table)

    def save(self, window: AvailabilityWindow) -> None:
        """空き枠をDBに保存する"""
        item = {
            "PK": f"BOAT#{window.resource_id}",
            "SK": self._sort_key(window),
            "entity_type": "AVAILABILITY",
            "window_id": str(window.id),
            "resource_id": str(window.resource_id),
            "start_time": to_storage_iso(window.period.start),
            "end_time": to_storage_iso(window.period.end),
            "price_per_hour": str(window.price_per_hour.amount),
            "currency": str(window.price_per_hour.currency),
            "GSI1PK": f"AVAILABILITY#{window.id}",
            "GSI1SK": "AVAILABILITY",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("SK").not_exists())
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise DuplicateResourceException(
                    f"Availability already exists: {window.id}"
                )
            raise

    def find_by_id(self, window_id: AvailabilityId) -> AvailabilityWindow | None:
        """空き枠IDで検索"""
        response = self.table.query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"AVAILABILITY#{window_id}"),
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def find_by_resource_id(self, resource_id: ResourceId) -> list[AvailabilityWindow]:
        items = query_all(
            self.table,
            KeyConditionExpression=Key("PK").eq(f"BOAT#{resource_id}")
            & Key("SK").begins_with("AVAILABILITY#"),
            ConsistentRead=True,
        )
        return [self._to_entity(item) for item in items]

    def find_overlapping(
        self, resource_id: ResourceId, period: TimePeriod
    ) -> list[AvailabilityWindow]:
        """期間と重なる空き枠を検索する"""
        items = query_all(
            self.table,
            KeyConditionExpression=Key("PK").eq(f"BOAT#{resource_id}")
            & Key("SK").between(
                "AVAILABILITY#", f"AVAILABILITY#{to_storage_iso(period.end)}"
            ),
            FilterExpression=Attr("start_time").lt(to_storage_iso(period.end))
            & Attr("end_time").gt(to_storage_iso(period.start)),
            ConsistentRead=True,
        )
        windows = [self._to_entity(item) for item in items]
        return [window for window in windows if window.overlaps(period)]

    def delete(self, window: AvailabilityWindow) -> None:
        self.table.delete_item(
            Key={"PK": f"BOAT#{window.resource_id}", "SK": self._sort_key(window)},
        )

    @staticmethod
    def _sort_key(window: AvailabilityWindow) -> str:
        return f"AVAILABILITY#{to_storage_iso(window.period.start)}#{window.id}"

    def _to_entity(self, item: dict) -> AvailabilityWindow:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return AvailabilityWindow(
            id=AvailabilityId(value=item["window_id"]),
            resource_id=ResourceId(value=item["resource_id"]),
            period=TimePeriod(
                start=from_storage_iso(item["start_time"]),
                end=from_storage_iso(item["end_time"]),
            ),
            price_per_hour=Money(
                amount=Decimal(item["price_per_hour"]),
                currency=Currency(item["currency"]),
            ),
        )
