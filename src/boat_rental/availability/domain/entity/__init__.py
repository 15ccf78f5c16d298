from .availability_window import AvailabilityWindow as AvailabilityWindow
