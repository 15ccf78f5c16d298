from .price_calculator import MINIMUM_BILLED_HOURS as MINIMUM_BILLED_HOURS
from .price_calculator import PriceCalculator as PriceCalculator
from .window_lookup import find_containing_window as find_containing_window
