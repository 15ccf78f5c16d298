from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from boat_rental.availability.applications import ManageAvailabilityService
from boat_rental.availability.domain import AvailabilityWindowFactory, WindowDetails
from boat_rental.availability.handlers.request_models import (
    CreateAvailabilityRequest,
)
from boat_rental.availability.handlers.response_models import to_response
from boat_rental.availability.infrastructure import DynamoDBAvailabilityRepository
from boat_rental.shared.config import Settings
from boat_rental.shared.domain import Failure, ResourceId
from boat_rental.shared.infrastructure import (
    DynamoDBResourceLock,
    DynamoDBResourceLookup,
)
from boat_rental.shared.utils import (
    api_response,
    failure_response,
    get_caller_id,
    get_path_parameter,
    invalid_request_response,
)

logger = Logger()

settings = Settings.from_env()
resources = DynamoDBResourceLookup(settings.table_name)
service = ManageAvailabilityService(
    repository=DynamoDBAvailabilityRepository(settings.table_name),
    factory=AvailabilityWindowFactory(),
    resources=resources,
    lock=DynamoDBResourceLock(
        table_name=settings.table_name,
        ttl_seconds=settings.booking_lock_ttl_seconds,
        wait_seconds=settings.booking_lock_wait_seconds,
    ),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """空き枠登録 Lambda Handler（ボートのオーナーのみ）"""
    resource_id = get_path_parameter(event, "resource_id")
    if not resource_id:
        return api_response(400, {"status": "error", "message": "resource_id is required"})

    caller_id = get_caller_id(event)
    resource = resources.find_by_id(ResourceId(value=resource_id))
    if resource is not None and str(resource.owner_id) != caller_id:
        return api_response(
            403, {"status": "error", "message": "Only the boat owner can add availability"}
        )

    try:
        request = CreateAvailabilityRequest.model_validate_json(event.body or "")
    except ValidationError as e:
        return invalid_request_response(e)

    logger.info("Received create availability request", extra={"resource_id": resource_id})

    window_details: WindowDetails = {
        "start_time": request.start_time,
        "end_time": request.end_time,
        "price_per_hour": request.price_per_hour,
        "currency": request.currency or settings.currency,
    }
    result = service.create(ResourceId(value=resource_id), window_details)
    if isinstance(result, Failure):
        return failure_response(result)
    return api_response(201, to_response(result))
