from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """オーケストレータ境界で返す失敗の種類"""

    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    PAYMENT_ERROR = "PAYMENT_ERROR"
    SYSTEM_ERROR = "SYSTEM_ERROR"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION_ERROR: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.PAYMENT_ERROR: 402,
    ErrorKind.SYSTEM_ERROR: 500,
}


@dataclass(frozen=True)
class Failure:
    """例外ではなくデータとして返す失敗

    ユースケースの戻り値は「成功時の値 | Failure」で表現する。
    """

    kind: ErrorKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def not_found(cls, message: str) -> Failure:
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def validation(cls, message: str) -> Failure:
        return cls(ErrorKind.VALIDATION_ERROR, message)

    @classmethod
    def conflict(cls, message: str, **details: Any) -> Failure:
        return cls(ErrorKind.CONFLICT, message, details)

    @classmethod
    def payment(cls, message: str, **details: Any) -> Failure:
        return cls(ErrorKind.PAYMENT_ERROR, message, details)

    @classmethod
    def system(cls, message: str) -> Failure:
        return cls(ErrorKind.SYSTEM_ERROR, message)
