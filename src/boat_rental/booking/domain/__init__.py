from .entity import MINIMUM_BOOKING_DURATION as MINIMUM_BOOKING_DURATION
from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .value_object import BookingId as BookingId
from .service import AvailabilityValidator as AvailabilityValidator
