"""Stock availability checks."""
from .availability import AvailabilityChecker, StockAvailabilityChecker

__all__ = [
    "AvailabilityChecker",
    "StockAvailabilityChecker"
]
