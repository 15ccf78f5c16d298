from .dynamodb_payment_repository import (
    DynamoDBPaymentRepository as DynamoDBPaymentRepository,
)
from .payment_gateway_simulator import (
    PaymentGatewaySimulator as PaymentGatewaySimulator,
)
