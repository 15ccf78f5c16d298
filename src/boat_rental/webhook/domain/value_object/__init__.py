from .gateway_notification import GatewayNotification as GatewayNotification
from .webhook_outcome import Ack as Ack
from .webhook_outcome import Rejected as Rejected
