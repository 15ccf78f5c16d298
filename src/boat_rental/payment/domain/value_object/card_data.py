from dataclasses import dataclass, field


@dataclass(frozen=True)
class CardData:
    """クレジットカード情報

    形式チェックは決済入力の検証で行う。ここでは保持と整形のみ。
    repr にカード番号・CVV を出さない。
    """

    number: str = field(repr=False)
    holder_name: str
    expiration: str
    cvv: str = field(repr=False)

    @property
    def fingerprint(self) -> str:
        """ゲートウェイに渡すカード識別子（区切り文字を除いた番号）"""
        return "".join(ch for ch in self.number if ch.isdigit())

    @property
    def last4(self) -> str:
        return self.fingerprint[-4:]
