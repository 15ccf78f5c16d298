from __future__ import annotations

from pydantic import BaseModel

from boat_rental.payment.applications.process_payment import PaymentResult


class PaymentData(BaseModel):
    """決済結果のレスポンスモデル"""

    payment_id: str | None
    transaction_id: str | None
    status: str
    message: str
    processed_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: PaymentData


def to_response(result: PaymentResult) -> dict:
    """PaymentResult をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=PaymentData(
            payment_id=str(result.payment_id) if result.payment_id else None,
            transaction_id=result.transaction_id,
            status=result.status.value,
            message=result.message,
            processed_at=result.processed_at.isoformat(),
        )
    ).model_dump()
