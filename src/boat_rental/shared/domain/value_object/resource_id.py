from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceId:
    """貸し出し対象（ボート）のID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("ResourceId cannot be empty")

    def __str__(self) -> str:
        return self.value
