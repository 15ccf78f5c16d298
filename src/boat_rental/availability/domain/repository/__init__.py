from .availability_repository import AvailabilityRepository as AvailabilityRepository
