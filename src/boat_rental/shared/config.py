from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal


def _parse_delay(raw: str) -> tuple[float, float] | None:
    """"1-3" 形式の擬似遅延設定を (最小, 最大) 秒に変換する"""
    if not raw:
        return None
    low, _, high = raw.partition("-")
    minimum = float(low)
    maximum = float(high) if high else minimum
    if minimum < 0 or maximum < minimum:
        raise ValueError(f"Invalid GATEWAY_DELAY_SECONDS: {raw}")
    return minimum, maximum


@dataclass(frozen=True)
class Settings:
    """Lambda 環境変数から読み込む設定値"""

    table_name: str | None = None
    currency: str = "BRL"
    payment_max_amount: Decimal = Decimal("10000")
    gateway_timeout_seconds: float = 10.0
    gateway_delay_seconds: tuple[float, float] | None = None
    gateway_random_seed: int | None = None
    booking_lock_ttl_seconds: int = 60
    booking_lock_wait_seconds: float = 5.0
    webhook_secret: str | None = None
    webhook_secret_arn: str | None = None

    @classmethod
    def from_env(cls) -> Settings:
        seed = os.getenv("GATEWAY_RANDOM_SEED", "")
        return cls(
            table_name=os.getenv("TABLE_NAME"),
            currency=os.getenv("CURRENCY", "BRL"),
            payment_max_amount=Decimal(os.getenv("PAYMENT_MAX_AMOUNT", "10000")),
            gateway_timeout_seconds=float(os.getenv("GATEWAY_TIMEOUT_SECONDS", "10")),
            gateway_delay_seconds=_parse_delay(os.getenv("GATEWAY_DELAY_SECONDS", "")),
            gateway_random_seed=int(seed) if seed else None,
            booking_lock_ttl_seconds=int(os.getenv("BOOKING_LOCK_TTL_SECONDS", "60")),
            booking_lock_wait_seconds=float(
                os.getenv("BOOKING_LOCK_WAIT_SECONDS", "5")
            ),
            webhook_secret=os.getenv("WEBHOOK_SECRET") or None,
            webhook_secret_arn=os.getenv("WEBHOOK_SECRET_ARN") or None,
        )
