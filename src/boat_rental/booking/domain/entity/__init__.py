from .booking import MINIMUM_BOOKING_DURATION as MINIMUM_BOOKING_DURATION
from .booking import Booking as Booking
