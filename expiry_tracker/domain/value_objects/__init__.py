"""Domain value objects - Immutable objects defined by their attributes."""

from .extracted_dates import ExtractedDates
from .freshness_tier import FreshnessTier
from .shelf_life import DurationUnit, ShelfLife
from .threshold import FreshnessThreshold

__all__ = [
    "DurationUnit",
    "ExtractedDates",
    "FreshnessThreshold",
    "FreshnessTier",
    "ShelfLife",
]
