from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BookingValidationException as BookingValidationException,
)
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    LockAcquisitionException as LockAcquisitionException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .lock import ResourceLock as ResourceLock
from .repository import Repository as Repository
from .result import ErrorKind as ErrorKind
from .result import Failure as Failure
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    ResourceId as ResourceId,
)
from .value_object import (
    TimePeriod as TimePeriod,
)
from .value_object import (
    UserId as UserId,
)
from .lookup import Resource as Resource
from .lookup import ResourceLookup as ResourceLookup
from .lookup import User as User
from .lookup import UserLookup as UserLookup
