from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from boat_rental.payment.domain import PaymentMethod


class CardRequest(BaseModel):
    """カード情報の入力スキーマ（形式チェックは決済処理で行う）"""

    model_config = ConfigDict(populate_by_name=True)

    number: str = Field(..., description="カード番号")
    holder_name: str = Field(..., alias="holderName", description="名義人")
    expiration: str = Field(
        ..., description="有効期限（MM/YY または MM/YYYY）", examples=["12/30"]
    )
    cvv: str = Field(..., description="セキュリティコード")


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "resourceId": "boat-123",
                    "startTime": "2025-01-02T10:00:00Z",
                    "endTime": "2025-01-02T14:00:00Z",
                    "paymentMethod": "CREDIT_CARD",
                    "card": {
                        "number": "4111111111111111",
                        "holderName": "Maria Silva",
                        "expiration": "12/30",
                        "cvv": "123",
                    },
                }
            ]
        },
    )

    resource_id: str = Field(..., alias="resourceId", min_length=1)
    start_time: datetime = Field(
        ..., alias="startTime", description="開始時刻（ISO 8601形式）"
    )
    end_time: datetime = Field(
        ..., alias="endTime", description="終了時刻（ISO 8601形式）"
    )
    payment_method: PaymentMethod = Field(..., alias="paymentMethod")
    card: CardRequest | None = None
    installments: int = Field(default=1)
