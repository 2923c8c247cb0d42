"""Application use cases."""

from .check_freshness import CheckFreshness
from .scan_product import ScanProduct, ScanResult

__all__ = [
    "CheckFreshness",
    "ScanProduct",
    "ScanResult",
]
