"""Domain service for classifying expiry dates into freshness tiers."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, time, timedelta

from ..value_objects import FreshnessThreshold, FreshnessTier

ONE_DAY = timedelta(days=1)


def to_utc_instant(value: date | datetime) -> datetime:
    """Convert a date or datetime to an aware UTC datetime (dates map to midnight)."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    return datetime.combine(value, time.min, tzinfo=UTC)


def days_until_expiry(expiry_date: date | datetime, now: datetime | None = None) -> int:
    """
    Whole days from now until expiry, rounded up.

    Time-of-day is part of the subtraction, so a date that is a fraction of a
    day in the past yields 0 rather than -1.
    """
    current = to_utc_instant(now) if now is not None else datetime.now(UTC)
    return math.ceil((to_utc_instant(expiry_date) - current) / ONE_DAY)


def classify(
    expiry_date: date | datetime,
    threshold_days: int = 7,
    now: datetime | None = None,
) -> FreshnessTier:
    """
    Classify an expiry date relative to now.

    Args:
        expiry_date: Expiry date; a bare date means midnight UTC.
        threshold_days: Lookahead window for the expiring-soon tier.
        now: Reference instant, defaults to the current UTC time.

    Returns:
        EXPIRED when expiry is behind now, EXPIRING_SOON when it is at most
        threshold_days away, otherwise FRESH.

    Raises:
        InvalidThresholdError: If threshold_days is negative.
    """
    threshold = FreshnessThreshold(days=threshold_days)
    diff_days = days_until_expiry(expiry_date, now)

    if diff_days < 0:
        return FreshnessTier.EXPIRED
    if diff_days <= threshold.days:
        return FreshnessTier.EXPIRING_SOON
    return FreshnessTier.FRESH
