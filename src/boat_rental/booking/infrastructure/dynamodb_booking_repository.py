from decimal import Decimal

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from boat_rental.booking.domain import (
    Booking,
    BookingId,
    BookingRepository,
    BookingStatus,
)
from boat_rental.shared.domain import (
    Currency,
    Money,
    ResourceId,
    TimePeriod,
    UserId,
)
from boat_rental.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)
from boat_rental.shared.infrastructure import (
    from_storage_iso,
    is_conditional_check_failure,
    query_all,
    resolve_table,
    to_storage_iso,
)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    PK: BOAT#<resource_id> / SK: BOOKING#<start>#<id>
    同一ボートの予約は開始時刻順に並ぶ。GSI1 (BOOKING#<id>) で ID 検索する。
    """

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = resolve_table(table_name, table)

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        item = {
            **self._key(booking),
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "renter_id": str(booking.renter_id),
            "resource_id": str(booking.resource_id),
            "start_time": to_storage_iso(booking.period.start),
            "end_time": to_storage_iso(booking.period.end),
            "total_price": str(booking.total_price.amount),
            "currency": str(booking.total_price.currency),
            "status": booking.status.value,
            "created_at": to_storage_iso(booking.created_at),
            "GSI1PK": f"BOOKING#{booking.id}",
            "GSI1SK": "BOOKING",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("SK").not_exists())
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                ) from e
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"BOOKING#{booking_id}"),
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def find_conflicting(
        self, resource_id: ResourceId, period: TimePeriod
    ) -> list[Booking]:
        """期間が重なるキャンセル済み以外の予約を検索する"""
        # SK は開始時刻順なので、期間の終了より前に始まる予約だけを読む
        items = query_all(
            self.table,
            KeyConditionExpression=Key("PK").eq(f"BOAT#{resource_id}")
            & Key("SK").between("BOOKING#", f"BOOKING#{to_storage_iso(period.end)}"),
            FilterExpression=Attr("start_time").lt(to_storage_iso(period.end))
            & Attr("end_time").gt(to_storage_iso(period.start))
            & Attr("status").ne(BookingStatus.CANCELLED.value),
            ConsistentRead=True,
        )
        bookings = [self._to_entity(item) for item in items]
        return [
            booking
            for booking in bookings
            if booking.blocks_calendar() and booking.overlaps_with(period)
        ]

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        kwargs: dict = {
            "Key": self._key(booking),
            "UpdateExpression": "SET #status = :status",
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {":status": booking.status.value},
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={booking.id}"
                ) from e
            raise

    @staticmethod
    def _key(booking: Booking) -> dict:
        return {
            "PK": f"BOAT#{booking.resource_id}",
            "SK": f"BOOKING#{to_storage_iso(booking.period.start)}#{booking.id}",
        }

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            renter_id=UserId(value=item["renter_id"]),
            resource_id=ResourceId(value=item["resource_id"]),
            period=TimePeriod(
                start=from_storage_iso(item["start_time"]),
                end=from_storage_iso(item["end_time"]),
            ),
            total_price=Money(
                amount=Decimal(item["total_price"]),
                currency=Currency(item["currency"]),
            ),
            status=BookingStatus(item["status"]),
            created_at=from_storage_iso(item["created_at"]),
        )
