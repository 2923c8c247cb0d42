"""Shelf life (best-before duration) value object."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum, auto
from typing import Self

from dateutil.relativedelta import relativedelta


class DurationUnit(StrEnum):
    """Calendar unit of a best-before duration."""

    MONTH = auto()
    YEAR = auto()

    @classmethod
    def from_token(cls, token: str) -> Self:
        """Map a label token (month, months, year, years, yr, yrs) to a unit."""
        lowered = token.lower()
        if "year" in lowered or "yr" in lowered:
            return cls.YEAR
        if "month" in lowered:
            return cls.MONTH
        msg = f"Unknown duration unit: {token!r}"
        raise ValueError(msg)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ShelfLife:
    """A best-before duration such as "18 months" or "2 years"."""

    count: int
    unit: DurationUnit

    def add_to(self, start: date) -> date:
        """
        Advance a date by this duration using calendar arithmetic.

        Day-of-month is preserved and clamped to the end of shorter months.

        Raises:
            ValueError: If the result falls outside the supported date range.
            OverflowError: If the count is too large to represent.
        """
        match self.unit:
            case DurationUnit.YEAR:
                return start + relativedelta(years=self.count)
            case DurationUnit.MONTH:
                return start + relativedelta(months=self.count)

    def __str__(self) -> str:
        suffix = "" if self.count == 1 else "s"
        return f"{self.count} {self.unit}{suffix}"
