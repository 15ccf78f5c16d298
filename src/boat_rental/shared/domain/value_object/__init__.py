from .currency import Currency
from .money import Money
from .resource_id import ResourceId
from .time_period import TimePeriod
from .user_id import UserId

__all__ = ["Currency", "Money", "ResourceId", "TimePeriod", "UserId"]
