"""Freshness threshold value object."""

from dataclasses import dataclass
from typing import ClassVar, Self

from ..exceptions import InvalidThresholdError


@dataclass(frozen=True, slots=True)
class FreshnessThreshold:
    """Lookahead window (in days) within which a product is expiring soon."""

    SETTING_MIN: ClassVar[int] = 1
    SETTING_MAX: ClassVar[int] = 30

    days: int = 7

    def __post_init__(self) -> None:
        """Validate the threshold is non-negative."""
        if self.days < 0:
            msg = f"Threshold must be a non-negative number of days, got {self.days}"
            raise InvalidThresholdError(msg)

    @classmethod
    def from_setting(cls, days: int) -> Self:
        """Create a threshold from the per-user reminder setting."""
        if not (cls.SETTING_MIN <= days <= cls.SETTING_MAX):
            msg = (
                f"Reminder setting must be between {cls.SETTING_MIN} "
                f"and {cls.SETTING_MAX} days, got {days}"
            )
            raise InvalidThresholdError(msg)
        return cls(days=days)
