class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合（不正な状態遷移など）"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass


class BookingValidationException(DomainException):
    """予約期間が不正な場合（最低利用時間・空き枠外など）"""

    pass


class LockAcquisitionException(DomainException):
    """ボート単位のロックを時間内に取得できなかった場合"""

    pass


class PaymentValidationException(DomainException):
    """決済入力が不正な場合"""

    pass


class PaymentGatewayException(DomainException):
    """決済ゲートウェイとの通信に失敗した場合（タイムアウト含む）"""

    pass
