"""Domain service for analyzing product freshness."""

from datetime import UTC, datetime

from ..entities import FreshnessReport, Product
from ..value_objects import FreshnessThreshold


class FreshnessAnalyzer:
    """Domain service for analyzing product freshness."""

    def __init__(self, threshold: FreshnessThreshold) -> None:
        """Initialize analyzer with a threshold."""
        self._threshold = threshold

    @property
    def threshold(self) -> FreshnessThreshold:
        return self._threshold

    def analyze(self, products: list[Product], now: datetime | None = None) -> FreshnessReport:
        """
        Analyze products and generate a freshness report.

        Args:
            products: Products to analyze.
            now: Reference instant, defaults to the current UTC time.

        Returns:
            FreshnessReport with products categorized by tier.
        """
        return FreshnessReport(
            products=list(products),
            threshold=self._threshold,
            generated_at=now or datetime.now(UTC),
        )

    def filter_requiring_attention(
        self, products: list[Product], now: datetime | None = None
    ) -> list[Product]:
        """Filter products that are expired or expiring soon."""
        current = now or datetime.now(UTC)
        return [
            p for p in products
            if p.get_tier(self._threshold, current).requires_attention
        ]
