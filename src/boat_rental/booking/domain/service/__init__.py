from .availability_validator import AvailabilityValidator as AvailabilityValidator
