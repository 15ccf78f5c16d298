import random

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from boat_rental.availability.domain import PriceCalculator
from boat_rental.availability.infrastructure import DynamoDBAvailabilityRepository
from boat_rental.booking.applications import BookingOrchestrator, CreateBookingCommand
from boat_rental.booking.domain import (
    AvailabilityValidator,
    BookingFactory,
    BookingStatus,
)
from boat_rental.booking.handlers.request_models import CreateBookingRequest
from boat_rental.booking.handlers.response_models import to_response
from boat_rental.booking.infrastructure import DynamoDBBookingRepository
from boat_rental.notification.infrastructure import LoggingNotificationSink
from boat_rental.payment.applications import PaymentOrchestrator
from boat_rental.payment.domain import CardData, PaymentInputValidator
from boat_rental.payment.infrastructure import (
    DynamoDBPaymentRepository,
    PaymentGatewaySimulator,
)
from boat_rental.shared.config import Settings
from boat_rental.shared.domain import Currency, Failure, ResourceId, UserId
from boat_rental.shared.infrastructure import (
    DynamoDBResourceLock,
    DynamoDBResourceLookup,
    DynamoDBUserLookup,
)
from boat_rental.shared.utils import (
    api_response,
    failure_response,
    get_caller_id,
    invalid_request_response,
)

logger = Logger()

settings = Settings.from_env()
availability_repository = DynamoDBAvailabilityRepository(settings.table_name)
booking_repository = DynamoDBBookingRepository(settings.table_name)
payments = PaymentOrchestrator(
    repository=DynamoDBPaymentRepository(settings.table_name),
    gateway=PaymentGatewaySimulator(
        rng=random.Random(settings.gateway_random_seed),
        delay_seconds=settings.gateway_delay_seconds,
    ),
    validator=PaymentInputValidator(max_amount=settings.payment_max_amount),
    timeout_seconds=settings.gateway_timeout_seconds,
)
service = BookingOrchestrator(
    users=DynamoDBUserLookup(settings.table_name),
    resources=DynamoDBResourceLookup(settings.table_name),
    validator=AvailabilityValidator(availability_repository, booking_repository),
    price_calculator=PriceCalculator(),
    payments=payments,
    bookings=booking_repository,
    lock=DynamoDBResourceLock(
        table_name=settings.table_name,
        ttl_seconds=settings.booking_lock_ttl_seconds,
        wait_seconds=settings.booking_lock_wait_seconds,
    ),
    notifications=LoggingNotificationSink(),
    factory=BookingFactory(Currency(settings.currency)),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler

    決済が確定した場合は 201、決済待ち（PENDING）の場合は 202 を返す。
    """
    renter_id = get_caller_id(event)
    if not renter_id:
        return api_response(401, {"status": "error", "message": "Unauthorized"})

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "")
    except ValidationError as e:
        return invalid_request_response(e)

    logger.info(
        "Received create booking request",
        extra={"resource_id": request.resource_id, "renter_id": renter_id},
    )

    result = service.create_booking(_to_command(renter_id, request))
    if isinstance(result, Failure):
        return failure_response(result)

    status_code = 201 if result.status == BookingStatus.CONFIRMED else 202
    return api_response(status_code, to_response(result))


def _to_command(renter_id: str, request: CreateBookingRequest) -> CreateBookingCommand:
    """リクエストボディから CreateBookingCommand を構築する"""
    card = None
    if request.card is not None:
        card = CardData(
            number=request.card.number,
            holder_name=request.card.holder_name,
            expiration=request.card.expiration,
            cvv=request.card.cvv,
        )
    return CreateBookingCommand(
        renter_id=UserId(value=renter_id),
        resource_id=ResourceId(value=request.resource_id),
        start_time=request.start_time,
        end_time=request.end_time,
        payment_method=request.payment_method,
        card=card,
        installments=request.installments,
    )
