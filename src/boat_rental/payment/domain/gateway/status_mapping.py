from enum import IntEnum

from boat_rental.payment.domain.enum import PaymentStatus


class GatewayStatusCode(IntEnum):
    """ゲートウェイ（PagSeguro 互換）のトランザクションステータスコード"""

    AWAITING_PAYMENT = 1
    IN_ANALYSIS = 2
    PAID = 3
    AVAILABLE = 4
    IN_DISPUTE = 5
    RETURNED = 6
    CANCELLED = 7
    DEBITED = 8
    TEMPORARY_RETENTION = 9


_STATUS_TABLE = {
    GatewayStatusCode.AWAITING_PAYMENT: PaymentStatus.PENDING,
    GatewayStatusCode.IN_ANALYSIS: PaymentStatus.PENDING,
    GatewayStatusCode.PAID: PaymentStatus.CONFIRMED,
    GatewayStatusCode.AVAILABLE: PaymentStatus.CONFIRMED,
    GatewayStatusCode.IN_DISPUTE: PaymentStatus.PENDING,
    GatewayStatusCode.RETURNED: PaymentStatus.CANCELLED,
    GatewayStatusCode.CANCELLED: PaymentStatus.CANCELLED,
    GatewayStatusCode.DEBITED: PaymentStatus.CANCELLED,
    GatewayStatusCode.TEMPORARY_RETENTION: PaymentStatus.PENDING,
}


def map_gateway_status(code: int | str | None) -> PaymentStatus:
    """ゲートウェイのステータスコードを決済ステータスに変換する

    同期課金と Webhook の両方でこの表を使う。未知のコードは UNKNOWN。
    """
    try:
        return _STATUS_TABLE.get(int(code), PaymentStatus.UNKNOWN)
    except (TypeError, ValueError):
        return PaymentStatus.UNKNOWN
