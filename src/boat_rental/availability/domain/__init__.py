from .entity import AvailabilityWindow as AvailabilityWindow
from .factory import AvailabilityWindowFactory as AvailabilityWindowFactory
from .factory import WindowDetails as WindowDetails
from .repository import AvailabilityRepository as AvailabilityRepository
from .service import PriceCalculator as PriceCalculator
from .service import find_containing_window as find_containing_window
from .value_object import AvailabilityId as AvailabilityId
