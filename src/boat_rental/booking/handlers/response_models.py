from __future__ import annotations

from pydantic import BaseModel

from boat_rental.booking.domain.entity.booking import Booking


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    resource_id: str
    renter_id: str
    start_time: str
    end_time: str
    total_price: str
    currency: str
    status: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=BookingData(
            booking_id=str(booking.id),
            resource_id=str(booking.resource_id),
            renter_id=str(booking.renter_id),
            start_time=booking.period.start_iso(),
            end_time=booking.period.end_iso(),
            total_price=str(booking.total_price.amount),
            currency=str(booking.total_price.currency),
            status=booking.status.value,
        )
    ).model_dump()
