from .signature import sign as sign
from .signature import verify_signature as verify_signature
