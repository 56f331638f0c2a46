__version__ = "0.1.0"

from windowed_minimum.errors import IndicatorError, InvalidParameterError
from windowed_minimum.indicators.library.minimum import Minimum, MinimumState
from windowed_minimum.indicators.protocol import Indicator

__all__ = ["Indicator", "IndicatorError", "InvalidParameterError", "Minimum", "MinimumState"]
