from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

ONE_HOUR = timedelta(hours=1)


def to_utc(value: datetime) -> datetime:
    """naive な日時は UTC とみなして UTC に正規化する"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class TimePeriod:
    """半開区間 [start, end) の利用期間

    境界が接しているだけの期間同士は重複とみなさない。
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", to_utc(self.start))
        object.__setattr__(self, "end", to_utc(self.end))
        if not self.start < self.end:
            raise ValueError("Start time must be before end time")

    @classmethod
    def from_iso(cls, start: str, end: str) -> TimePeriod:
        """ISO 8601 形式の文字列から生成"""
        try:
            start_dt = datetime.fromisoformat(start.replace("Z", "+00:00"))
            end_dt = datetime.fromisoformat(end.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {e}") from e
        return cls(start=start_dt, end=end_dt)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def whole_hours(self) -> int:
        """端数を切り捨てた時間数"""
        return self.duration // ONE_HOUR

    def overlaps(self, other: TimePeriod) -> bool:
        """期間が重複しているか（接しているだけなら False）"""
        return self.start < other.end and other.start < self.end

    def contains(self, other: TimePeriod) -> bool:
        """other がこの期間に完全に含まれるか（境界一致は含む）"""
        return self.start <= other.start and other.end <= self.end

    def start_iso(self) -> str:
        return self.start.isoformat()

    def end_iso(self) -> str:
        return self.end.isoformat()

    def __str__(self) -> str:
        return f"{self.start_iso()}/{self.end_iso()}"
