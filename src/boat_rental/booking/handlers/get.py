from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from boat_rental.booking.applications import GetBookingService
from boat_rental.booking.domain import BookingId
from boat_rental.booking.handlers.response_models import to_response
from boat_rental.booking.infrastructure import DynamoDBBookingRepository
from boat_rental.shared.domain import Failure
from boat_rental.shared.utils import api_response, failure_response, get_path_parameter

logger = Logger()

repository = DynamoDBBookingRepository()
service = GetBookingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約照会 Lambda Handler"""
    booking_id = get_path_parameter(event, "booking_id")
    if not booking_id:
        return api_response(400, {"status": "error", "message": "booking_id is required"})

    logger.info("Fetching booking", extra={"booking_id": booking_id})

    result = service.get(BookingId(value=booking_id))
    if isinstance(result, Failure):
        return failure_response(result)
    return api_response(200, to_response(result))
