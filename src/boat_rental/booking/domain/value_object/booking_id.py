from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID

    永続化前（決済中）の予約にも採番されるため、アプリ側で生成する。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        return cls(value=str(uuid.uuid4()))
