"""Domain entities - Objects with identity and lifecycle."""

from .freshness_report import FreshnessReport
from .product import Product

__all__ = [
    "FreshnessReport",
    "Product",
]
