from .entity import Payment as Payment
from .enum import PaymentMethod as PaymentMethod
from .enum import PaymentStatus as PaymentStatus
from .factory import PaymentFactory as PaymentFactory
from .gateway import GatewayCharge as GatewayCharge
from .gateway import GatewayOutcome as GatewayOutcome
from .gateway import GatewayStatusCode as GatewayStatusCode
from .gateway import PaymentGateway as PaymentGateway
from .gateway import map_gateway_status as map_gateway_status
from .repository import PaymentRepository as PaymentRepository
from .service import PaymentInput as PaymentInput
from .service import PaymentInputValidator as PaymentInputValidator
from .value_object import CardData as CardData
from .value_object import PaymentId as PaymentId
