from .enums import OverlayType
from .errors import (
    ErrorCode,
    IndicatorError,
    InsufficientDataError,
    InvalidParameterError,
)
from .models import OHLCBar, PriceSeries

__all__ = [
    # Enums
    "OverlayType",
    # Errors
    "ErrorCode",
    "IndicatorError",
    "InsufficientDataError",
    "InvalidParameterError",
    # Models
    "OHLCBar",
    "PriceSeries",
]
