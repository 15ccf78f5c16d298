from .process_payment import PaymentErrorKind as PaymentErrorKind
from .process_payment import PaymentOrchestrator as PaymentOrchestrator
from .process_payment import PaymentResult as PaymentResult
