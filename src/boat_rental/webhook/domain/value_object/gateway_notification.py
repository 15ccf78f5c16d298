from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GatewayNotification(BaseModel):
    """決済ゲートウェイからの非同期通知（PagSeguro 互換）"""

    model_config = ConfigDict(populate_by_name=True)

    notification_code: str | None = Field(default=None, alias="notificationCode")
    notification_type: str | None = Field(default=None, alias="notificationType")
    transaction_code: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("transactionCode", "code", "transaction_code"),
        description="ゲートウェイのトランザクションID",
    )
    reference: str | None = None
    status: int = Field(..., description="ゲートウェイのステータスコード")
