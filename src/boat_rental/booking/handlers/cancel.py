from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from boat_rental.booking.applications import CancelBookingService
from boat_rental.booking.domain import BookingId
from boat_rental.booking.handlers.response_models import to_response
from boat_rental.booking.infrastructure import DynamoDBBookingRepository
from boat_rental.notification.infrastructure import LoggingNotificationSink
from boat_rental.shared.domain import Failure
from boat_rental.shared.utils import api_response, failure_response, get_path_parameter

logger = Logger()

repository = DynamoDBBookingRepository()
service = CancelBookingService(
    repository=repository, notifications=LoggingNotificationSink()
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler"""
    booking_id = get_path_parameter(event, "booking_id")
    if not booking_id:
        return api_response(400, {"status": "error", "message": "booking_id is required"})

    logger.info("Received cancel booking request", extra={"booking_id": booking_id})

    result = service.cancel(BookingId(value=booking_id))
    if isinstance(result, Failure):
        return failure_response(result)
    return api_response(200, to_response(result))
