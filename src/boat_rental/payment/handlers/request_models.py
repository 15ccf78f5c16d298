from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from boat_rental.payment.domain import PaymentMethod
from boat_rental.shared.utils import to_decimal


class CardRequest(BaseModel):
    """カード情報の入力スキーマ"""

    model_config = ConfigDict(populate_by_name=True)

    number: str
    holder_name: str = Field(..., alias="holderName")
    expiration: str
    cvv: str


class ProcessPaymentRequest(BaseModel):
    """決済処理リクエストモデル

    金額の上限やカード形式の検証は決済処理側で行い、結果として返す。
    """

    model_config = ConfigDict(populate_by_name=True)

    amount: Decimal = Field(..., description="決済金額")
    currency: str = Field(
        default="BRL",
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）",
    )
    payment_method: PaymentMethod | None = Field(default=None, alias="paymentMethod")
    booking_id: str | None = Field(default=None, alias="bookingId")
    resource_id: str | None = Field(default=None, alias="resourceId")
    card: CardRequest | None = None
    user_email: str | None = Field(default=None, alias="userEmail")
    description: str | None = None
    installments: int = 1

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)
