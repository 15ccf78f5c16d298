from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む、小数点以下2桁の固定小数点）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        amount = Decimal(str(self.amount))
        if amount < 0:
            raise ValueError("Amount cannot be negative")
        object.__setattr__(
            self, "amount", amount.quantize(CENTS, rounding=ROUND_HALF_UP)
        )

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> Money:
        """金額を整数倍する（時間単価 × 時間数）"""
        return Money(amount=self.amount * factor, currency=self.currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(Decimal("0"), currency)

    @classmethod
    def brl(cls, amount: Decimal) -> Money:
        """ブラジル・レアルで Money を生成"""
        return cls(amount, Currency.brl())
