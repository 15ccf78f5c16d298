from dataclasses import dataclass


@dataclass(frozen=True)
class Ack:
    """通知を受理した（状態が変わらなかった場合も含む）"""

    message: str
    changed: bool = False


@dataclass(frozen=True)
class Rejected:
    """通知を拒否した"""

    reason: str
