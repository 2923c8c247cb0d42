"""Freshness report aggregate root."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..value_objects import FreshnessThreshold, FreshnessTier
from .product import Product


@dataclass(slots=True)
class FreshnessReport:
    """Aggregate root grouping products by freshness tier at a point in time."""

    products: list[Product]
    threshold: FreshnessThreshold
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    _categorized: dict[FreshnessTier, list[Product]] = field(
        init=False, repr=False, default_factory=dict
    )
    _tiers: dict[int, FreshnessTier] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        """Categorize products by tier as of generated_at."""
        self._categorized = {tier: [] for tier in FreshnessTier}
        self._tiers = {}
        for product in self.products:
            tier = product.get_tier(self.threshold, self.generated_at)
            self._tiers[id(product)] = tier
            self._categorized[tier].append(product)

    def tier_of(self, product: Product) -> FreshnessTier:
        """Tier of a product as of generated_at."""
        tier = self._tiers.get(id(product))
        if tier is None:
            return product.get_tier(self.threshold, self.generated_at)
        return tier

    def days_until_expiry(self, product: Product) -> int:
        """Days remaining for a product as of generated_at."""
        return product.days_until_expiry(self.generated_at)

    @property
    def fresh(self) -> list[Product]:
        """Get fresh products."""
        return self._categorized[FreshnessTier.FRESH]

    @property
    def expiring_soon(self) -> list[Product]:
        """Get products expiring within the threshold."""
        return self._categorized[FreshnessTier.EXPIRING_SOON]

    @property
    def expired(self) -> list[Product]:
        """Get expired products."""
        return self._categorized[FreshnessTier.EXPIRED]

    @property
    def fresh_count(self) -> int:
        return len(self.fresh)

    @property
    def expiring_soon_count(self) -> int:
        return len(self.expiring_soon)

    @property
    def expired_count(self) -> int:
        return len(self.expired)

    @property
    def total_count(self) -> int:
        """Total product count."""
        return len(self.products)

    @property
    def requires_attention(self) -> bool:
        """Check if any product is expired or expiring soon."""
        return bool(self.expired or self.expiring_soon)

    def get_counts(self) -> dict[str, int]:
        """Get product counts keyed by tier value."""
        counts = {str(tier): len(items) for tier, items in self._categorized.items()}
        counts["total"] = self.total_count
        return counts

    def get_summary(self) -> str:
        """Generate a human-readable summary of the report."""
        if not self.products:
            return "No products tracked"

        parts: list[str] = []
        if self.expired_count:
            parts.append(f"{self.expired_count} expired")
        if self.expiring_soon_count:
            parts.append(f"{self.expiring_soon_count} expiring soon")
        if self.fresh_count:
            parts.append(f"{self.fresh_count} fresh")

        total_attention = self.expired_count + self.expiring_soon_count
        if not total_attention:
            return "All products are fresh"

        noun = "product" if total_attention == 1 else "products"
        return f"{total_attention} {noun} requiring attention: {', '.join(parts)}"

    def get_products_sorted_by_urgency(self) -> list[Product]:
        """Get all products sorted by urgency (soonest expiry first)."""
        return sorted(self.products, key=self.days_until_expiry)

    def filter_products(
        self, tier: FreshnessTier | None = None, query: str = ""
    ) -> list[Product]:
        """
        Filter products by tier and name search.

        Args:
            tier: Tier to keep, or None for all tiers.
            query: Case-insensitive name substring; empty matches everything.

        Returns:
            Matching products in their original order.
        """
        return [
            p for p in self.products
            if (tier is None or self.tier_of(p) == tier) and p.matches_query(query)
        ]
