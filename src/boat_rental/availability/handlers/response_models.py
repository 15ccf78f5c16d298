from __future__ import annotations

from pydantic import BaseModel

from boat_rental.availability.domain.entity import AvailabilityWindow


class AvailabilityData(BaseModel):
    """空き枠データのレスポンスモデル"""

    window_id: str
    resource_id: str
    start_time: str
    end_time: str
    price_per_hour: str
    currency: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: AvailabilityData


class ListResponse(BaseModel):
    """一覧レスポンスモデル"""

    status: str = "success"
    data: list[AvailabilityData]


def to_data(window: AvailabilityWindow) -> AvailabilityData:
    return AvailabilityData(
        window_id=str(window.id),
        resource_id=str(window.resource_id),
        start_time=window.period.start_iso(),
        end_time=window.period.end_iso(),
        price_per_hour=str(window.price_per_hour.amount),
        currency=str(window.price_per_hour.currency),
    )


def to_response(window: AvailabilityWindow) -> dict:
    """AvailabilityWindow エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_data(window)).model_dump()


def to_list_response(windows: list[AvailabilityWindow]) -> dict:
    return ListResponse(data=[to_data(window) for window in windows]).model_dump()
