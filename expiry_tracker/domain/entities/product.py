"""Product entity representing a tracked item with an expiry date."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Self
from uuid import UUID

from ..services.freshness_classifier import classify, days_until_expiry
from ..value_objects import FreshnessThreshold, FreshnessTier


@dataclass(slots=True)
class Product:
    """A stored product record handed over by the persistence layer."""

    id: UUID
    name: str
    expiry_date: date | datetime
    manufacturing_date: date | datetime | None = None
    added_date: datetime = field(default_factory=lambda: datetime.now(UTC))
    category: str | None = None
    notes: str | None = None
    image_url: str | None = None

    def days_until_expiry(self, now: datetime | None = None) -> int:
        """Days remaining until expiration (negative if expired)."""
        return days_until_expiry(self.expiry_date, now)

    def get_tier(self, threshold: FreshnessThreshold, now: datetime | None = None) -> FreshnessTier:
        """Determine the freshness tier; recomputed on every call."""
        return classify(self.expiry_date, threshold.days, now)

    def matches_query(self, query: str) -> bool:
        """Case-insensitive substring search on the product name."""
        return query.lower() in self.name.lower()

    @classmethod
    def create(
        cls,
        *,
        product_id: str,
        name: str,
        expiry_date: date | datetime,
        manufacturing_date: date | datetime | None = None,
        added_date: datetime | None = None,
        category: str | None = None,
        notes: str | None = None,
        image_url: str | None = None,
    ) -> Self:
        """Factory method to create a Product from raw data."""
        return cls(
            id=UUID(product_id),
            name=name,
            expiry_date=expiry_date,
            manufacturing_date=manufacturing_date,
            added_date=added_date or datetime.now(UTC),
            category=category,
            notes=notes,
            image_url=image_url,
        )
