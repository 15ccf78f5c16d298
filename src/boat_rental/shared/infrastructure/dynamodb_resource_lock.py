import time
import uuid
from collections.abc import Callable

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from boat_rental.shared.domain.exception import LockAcquisitionException
from boat_rental.shared.domain.lock import ResourceLock
from boat_rental.shared.domain.value_object import ResourceId

from .dynamodb import is_conditional_check_failure, resolve_table

logger = Logger(child=True)


class DynamoDBResourceLock(ResourceLock):
    """条件付き書き込みによるリース型ロック

    LOCK#<resource_id> アイテムが存在しないか期限切れの場合のみ取得できる。
    expires_at は DynamoDB TTL 属性としても使う。
    """

    def __init__(
        self,
        table_name: str | None = None,
        table=None,
        ttl_seconds: int = 60,
        wait_seconds: float = 5.0,
        retry_interval: float = 0.1,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.table = resolve_table(table_name, table)
        self._ttl_seconds = ttl_seconds
        self._wait_seconds = wait_seconds
        self._retry_interval = retry_interval
        self._clock = clock
        self._sleep = sleep

    def acquire(self, resource_id: ResourceId) -> str:
        token = uuid.uuid4().hex
        deadline = self._clock() + self._wait_seconds
        while True:
            now = int(self._clock())
            try:
                self.table.put_item(
                    Item={
                        "PK": self._key(resource_id),
                        "SK": "LOCK",
                        "entity_type": "LOCK",
                        "owner": token,
                        "expires_at": now + self._ttl_seconds,
                    },
                    ConditionExpression=Attr("PK").not_exists()
                    | Attr("expires_at").lt(now),
                )
                return token
            except ClientError as e:
                if not is_conditional_check_failure(e):
                    raise
            if self._clock() >= deadline:
                raise LockAcquisitionException(f"Resource is busy: {resource_id}")
            self._sleep(self._retry_interval)

    def release(self, resource_id: ResourceId, token: str) -> None:
        try:
            self.table.delete_item(
                Key={"PK": self._key(resource_id), "SK": "LOCK"},
                ConditionExpression=Attr("owner").eq(token),
            )
        except ClientError as e:
            if not is_conditional_check_failure(e):
                raise
            # リース期限切れ後に別の呼び出し元が取得済み
            logger.warning(
                "Lock lease was lost before release",
                extra={"resource_id": str(resource_id)},
            )

    @staticmethod
    def _key(resource_id: ResourceId) -> str:
        return f"LOCK#{resource_id}"
