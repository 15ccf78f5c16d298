from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentId:
    """決済ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("PaymentId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> PaymentId:
        return cls(value=str(uuid.uuid4()))
