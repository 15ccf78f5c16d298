import os
from datetime import datetime

import boto3
from botocore.exceptions import ClientError

from boat_rental.shared.domain.value_object.time_period import to_utc


def resolve_table(table_name: str | None = None, table=None):
    """DynamoDB の Table リソースを返す（テストでは table を直接注入する）"""
    if table is not None:
        return table
    dynamodb = boto3.resource("dynamodb")
    return dynamodb.Table(table_name or os.getenv("TABLE_NAME"))


def to_storage_iso(value: datetime) -> str:
    """UTC・マイクロ秒固定の ISO 8601 文字列に変換する

    書式を固定することで、文字列比較が時刻の前後関係と一致する。
    """
    return to_utc(value).isoformat(timespec="microseconds")


def from_storage_iso(value: str) -> datetime:
    return datetime.fromisoformat(value)


def is_conditional_check_failure(error: ClientError) -> bool:
    return error.response["Error"]["Code"] == "ConditionalCheckFailedException"


def query_all(table, **kwargs) -> list[dict]:
    """LastEvaluatedKey を辿って全ページのアイテムを返す

    FilterExpression は 1 ページ (最大 1MB) を読んだ後に適用されるため、
    1 回の query だけでは条件に合うアイテムを取りこぼすことがある。
    """
    items: list[dict] = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return items
        kwargs["ExclusiveStartKey"] = last_key
