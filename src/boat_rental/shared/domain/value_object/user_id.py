from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """ユーザーID（借り手・オーナー共通）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
