from .cancel_booking import CancelBookingService as CancelBookingService
from .create_booking import BookingOrchestrator as BookingOrchestrator
from .create_booking import CreateBookingCommand as CreateBookingCommand
from .get_booking import GetBookingService as GetBookingService
