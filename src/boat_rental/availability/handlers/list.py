from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from boat_rental.availability.applications import ManageAvailabilityService
from boat_rental.availability.domain import AvailabilityWindowFactory
from boat_rental.availability.handlers.response_models import to_list_response
from boat_rental.availability.infrastructure import DynamoDBAvailabilityRepository
from boat_rental.shared.domain import ResourceId
from boat_rental.shared.infrastructure import (
    DynamoDBResourceLock,
    DynamoDBResourceLookup,
)
from boat_rental.shared.utils import api_response, get_path_parameter

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
    """ボートの空き枠一覧 Lambda Handler"""
    resource_id = get_path_parameter(event, "resource_id")
    if not resource_id:
        return api_response(400, {"status": "error", "message": "resource_id is required"})

    windows = service.list_for_resource(ResourceId(value=resource_id))
    logger.info(
        "Listed availability windows",
        extra={"resource_id": resource_id, "count": len(windows)},
    )
    return api_response(200, to_list_response(windows))
