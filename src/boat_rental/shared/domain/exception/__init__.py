from .exceptions import (
    BookingValidationException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    LockAcquisitionException,
    OptimisticLockException,
    PaymentGatewayException,
    PaymentValidationException,
)

__all__ = [
    "DomainException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "BookingValidationException",
    "LockAcquisitionException",
    "PaymentValidationException",
    "PaymentGatewayException",
]
