import random

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from boat_rental.booking.domain import BookingId
from boat_rental.payment.applications import (
    PaymentErrorKind,
    PaymentOrchestrator,
    PaymentResult,
)
from boat_rental.payment.domain import CardData, PaymentInput, PaymentInputValidator
from boat_rental.payment.handlers.request_models import ProcessPaymentRequest
from boat_rental.payment.handlers.response_models import to_response
from boat_rental.payment.infrastructure import (
    DynamoDBPaymentRepository,
    PaymentGatewaySimulator,
)
from boat_rental.shared.config import Settings
from boat_rental.shared.domain import ErrorKind, Failure, ResourceId
from boat_rental.shared.utils import (
    api_response,
    failure_response,
    invalid_request_response,
)

logger = Logger()

settings = Settings.from_env()
service = PaymentOrchestrator(
    repository=DynamoDBPaymentRepository(settings.table_name),
    gateway=PaymentGatewaySimulator(
        rng=random.Random(settings.gateway_random_seed),
        delay_seconds=settings.gateway_delay_seconds,
    ),
    validator=PaymentInputValidator(max_amount=settings.payment_max_amount),
    timeout_seconds=settings.gateway_timeout_seconds,
)

_ERROR_KINDS = {
    PaymentErrorKind.VALIDATION_ERROR: ErrorKind.VALIDATION_ERROR,
    PaymentErrorKind.GATEWAY_ERROR: ErrorKind.PAYMENT_ERROR,
    PaymentErrorKind.SYSTEM_ERROR: ErrorKind.SYSTEM_ERROR,
}


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """直接決済 Lambda Handler

    確定は 201、決済待ちは 202、拒否は 402 を返す。
    """
    try:
        request = ProcessPaymentRequest.model_validate_json(event.body or "")
    except ValidationError as e:
        return invalid_request_response(e)

    logger.info("Received process payment request")

    result = service.process(_to_payment_input(request))
    if result.success:
        return api_response(201, to_response(result))
    if result.is_pending:
        return api_response(202, to_response(result))
    return failure_response(_to_failure(result))


def _to_failure(result: PaymentResult) -> Failure:
    kind = _ERROR_KINDS.get(result.error_kind, ErrorKind.PAYMENT_ERROR)
    details = {"payment_status": result.status.value}
    if result.transaction_id:
        details["transaction_id"] = result.transaction_id
    return Failure(kind, result.message, details)


def _to_payment_input(request: ProcessPaymentRequest) -> PaymentInput:
    """リクエストボディから PaymentInput を構築する"""
    card = None
    if request.card is not None:
        card = CardData(
            number=request.card.number,
            holder_name=request.card.holder_name,
            expiration=request.card.expiration,
            cvv=request.card.cvv,
        )
    return PaymentInput(
        amount=request.amount,
        currency=request.currency,
        payment_method=request.payment_method,
        booking_id=BookingId(value=request.booking_id) if request.booking_id else None,
        resource_id=(
            ResourceId(value=request.resource_id) if request.resource_id else None
        ),
        card=card,
        user_email=request.user_email,
        description=request.description,
        installments=request.installments,
    )
