"""Domain services - Stateless operations on domain objects."""

from .date_extractor import extract_dates, normalize_label_text
from .freshness_classifier import classify, days_until_expiry

__all__ = [
    "classify",
    "days_until_expiry",
    "extract_dates",
    "normalize_label_text",
]
