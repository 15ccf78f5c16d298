from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from boat_rental.shared.utils import to_decimal


class CreateAvailabilityRequest(BaseModel):
    """空き枠登録リクエストスキーマ"""

    model_config = ConfigDict(populate_by_name=True)

    start_time: str = Field(
        ...,
        alias="startTime",
        description="開始時刻（ISO 8601形式）",
        examples=["2025-01-01T08:00:00Z"],
    )
    end_time: str = Field(
        ...,
        alias="endTime",
        description="終了時刻（ISO 8601形式）",
        examples=["2025-01-31T08:00:00Z"],
    )
    price_per_hour: Decimal = Field(
        ..., alias="pricePerHour", gt=0, description="時間単価", examples=[250]
    )
    currency: str | None = Field(
        default=None,
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217、省略時は設定値）",
    )

    @field_validator("price_per_hour", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)
