from .availability_window_factory import (
    AvailabilityWindowFactory as AvailabilityWindowFactory,
)
from .availability_window_factory import WindowDetails as WindowDetails
