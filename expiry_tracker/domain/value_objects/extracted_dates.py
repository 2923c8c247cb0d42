"""Extracted dates value object."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class ExtractedDates:
    """Best-effort manufacturing and expiry dates read from a label."""

    manufacturing_date: date | None = None
    expiry_date: date | None = None

    @property
    def has_expiry(self) -> bool:
        """Check if an expiry date was found (a scan without one needs manual entry)."""
        return self.expiry_date is not None

    @property
    def is_empty(self) -> bool:
        """Check if no date at all could be inferred."""
        return self.manufacturing_date is None and self.expiry_date is None
