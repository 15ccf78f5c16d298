from .availability_id import AvailabilityId as AvailabilityId
