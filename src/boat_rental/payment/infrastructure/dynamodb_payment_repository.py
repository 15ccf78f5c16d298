from decimal import Decimal

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from boat_rental.booking.domain.value_object import BookingId
from boat_rental.payment.domain import (
    Payment,
    PaymentId,
    PaymentMethod,
    PaymentRepository,
    PaymentStatus,
)
from boat_rental.shared.domain import Currency, Money, ResourceId
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


class DynamoDBPaymentRepository(PaymentRepository):
    """DynamoDBを使用したPaymentRepository の具象実装

    PK=PAYMENT#<id> / SK=METADATA
    GSI1: 予約ごとの決済一覧（GSI1PK=BOOKING#<booking_id>）
    GSI2: トランザクションID検索（GSI2PK=TXN#<transaction_id>）
    """

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = resolve_table(table_name, table)

    def save(self, payment: Payment) -> None:
        """決済をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(payment),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise DuplicateResourceException(
                    f"Payment already exists: {payment.id}"
                ) from e
            raise

    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        response = self.table.get_item(
            Key={"PK": f"PAYMENT#{payment_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        return self._to_entity(item) if item else None

    def find_by_transaction_id(self, transaction_id: str) -> Payment | None:
        response = self.table.query(
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"TXN#{transaction_id}"),
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def find_by_booking_id(self, booking_id: BookingId) -> list[Payment]:
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"BOOKING#{booking_id}")
            & Key("GSI1SK").begins_with("PAYMENT#"),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def update(
        self, payment: Payment, expected_status: PaymentStatus | None = None
    ) -> None:
        """決済のステータスとゲートウェイ応答を更新する"""
        names = {"#status": "status"}
        values: dict = {":status": payment.status.value}
        assignments = ["#status = :status"]
        optional = {
            "transaction_id": payment.transaction_id,
            "gateway_message": payment.gateway_message,
            "gateway_response": payment.gateway_response,
            "processed_at": (
                to_storage_iso(payment.processed_at) if payment.processed_at else None
            ),
        }
        for attribute, value in optional.items():
            if value is not None:
                assignments.append(f"{attribute} = :{attribute}")
                values[f":{attribute}"] = value
        if payment.transaction_id:
            assignments.append("GSI2PK = :gsi2pk")
            values[":gsi2pk"] = f"TXN#{payment.transaction_id}"

        kwargs: dict = {
            "Key": {"PK": f"PAYMENT#{payment.id}", "SK": "METADATA"},
            "UpdateExpression": "SET " + ", ".join(assignments),
            "ExpressionAttributeNames": names,
            "ExpressionAttributeValues": values,
        }
        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if is_conditional_check_failure(e):
                raise OptimisticLockException(
                    f"Payment status conflict: "
                    f"expected {expected_status}, "
                    f"payment_id={payment.id}"
                ) from e
            raise

    def _to_item(self, payment: Payment) -> dict:
        item = {
            "PK": f"PAYMENT#{payment.id}",
            "SK": "METADATA",
            "entity_type": "PAYMENT",
            "payment_id": str(payment.id),
            "amount": str(payment.amount.amount),
            "currency": str(payment.amount.currency),
            "payment_method": payment.method.value,
            "status": payment.status.value,
            "created_at": to_storage_iso(payment.created_at),
        }
        if payment.booking_id:
            item["booking_id"] = str(payment.booking_id)
            item["GSI1PK"] = f"BOOKING#{payment.booking_id}"
            item["GSI1SK"] = f"PAYMENT#{to_storage_iso(payment.created_at)}"
        if payment.resource_id:
            item["resource_id"] = str(payment.resource_id)
        if payment.transaction_id:
            item["transaction_id"] = payment.transaction_id
            item["GSI2PK"] = f"TXN#{payment.transaction_id}"
        if payment.gateway_message:
            item["gateway_message"] = payment.gateway_message
        return item

    def _to_entity(self, item: dict) -> Payment:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Payment(
            id=PaymentId(value=item["payment_id"]),
            amount=Money(
                amount=Decimal(item["amount"]),
                currency=Currency(item["currency"]),
            ),
            method=PaymentMethod(item["payment_method"]),
            booking_id=(
                BookingId(value=item["booking_id"]) if item.get("booking_id") else None
            ),
            resource_id=(
                ResourceId(value=item["resource_id"])
                if item.get("resource_id")
                else None
            ),
            status=PaymentStatus(item["status"]),
            transaction_id=item.get("transaction_id"),
            gateway_message=item.get("gateway_message"),
            gateway_response=item.get("gateway_response"),
            created_at=from_storage_iso(item["created_at"]),
            processed_at=(
                from_storage_iso(item["processed_at"])
                if item.get("processed_at")
                else None
            ),
        )
