from .payment_gateway import GatewayCharge as GatewayCharge
from .payment_gateway import GatewayOutcome as GatewayOutcome
from .payment_gateway import PaymentGateway as PaymentGateway
from .status_mapping import GatewayStatusCode as GatewayStatusCode
from .status_mapping import map_gateway_status as map_gateway_status
