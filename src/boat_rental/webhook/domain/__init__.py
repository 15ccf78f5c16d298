from .service import sign as sign
from .service import verify_signature as verify_signature
from .value_object import Ack as Ack
from .value_object import GatewayNotification as GatewayNotification
from .value_object import Rejected as Rejected
