from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from boat_rental.availability.applications import ManageAvailabilityService
from boat_rental.availability.domain import AvailabilityId, AvailabilityWindowFactory
from boat_rental.availability.handlers.response_models import to_response
from boat_rental.availability.infrastructure import DynamoDBAvailabilityRepository
from boat_rental.shared.domain import Failure
from boat_rental.shared.infrastructure import (
    DynamoDBResourceLock,
    DynamoDBResourceLookup,
)
from boat_rental.shared.utils import api_response, failure_response, get_path_parameter

logger = Logger()

service = ManageAvailabilityService(
    repository=DynamoDBAvailabilityRepository(),
    factory=AvailabilityWindowFactory(),
    resources=DynamoDBResourceLookup(),
    lock=DynamoDBResourceLock(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """空き枠削除 Lambda Handler"""
    window_id = get_path_parameter(event, "window_id")
    if not window_id:
        return api_response(400, {"status": "error", "message": "window_id is required"})

    logger.info("Received delete availability request", extra={"window_id": window_id})

    result = service.delete(AvailabilityId(value=window_id))
    if isinstance(result, Failure):
        return failure_response(result)
    return api_response(200, to_response(result))
