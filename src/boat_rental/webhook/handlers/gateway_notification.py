from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from boat_rental.booking.infrastructure import DynamoDBBookingRepository
from boat_rental.payment.infrastructure import DynamoDBPaymentRepository
from boat_rental.shared.config import Settings
from boat_rental.shared.utils import api_response
from boat_rental.webhook.applications import WebhookHandler
from boat_rental.webhook.domain import Ack
from boat_rental.webhook.infrastructure import get_webhook_secret

logger = Logger()

SIGNATURE_HEADER = "X-Signature"

settings = Settings.from_env()
payment_repository = DynamoDBPaymentRepository(settings.table_name)
booking_repository = DynamoDBBookingRepository(settings.table_name)

_service: WebhookHandler | None = None


def _get_service() -> WebhookHandler:
    global _service
    if _service is None:
        _service = WebhookHandler(
            secret=get_webhook_secret(settings),
            payments=payment_repository,
            bookings=booking_repository,
        )
    return _service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """決済ゲートウェイ Webhook Lambda Handler"""
    signature = event.get_header_value(SIGNATURE_HEADER)
    outcome = _get_service().on_gateway_notification(event.decoded_body or "", signature)

    if isinstance(outcome, Ack):
        return api_response(200, {"status": "ok", "message": outcome.message})
    return api_response(400, {"status": "rejected", "message": outcome.reason})
