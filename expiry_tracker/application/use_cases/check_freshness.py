"""Use case for checking the freshness of tracked products."""

import logging
from datetime import datetime

from ...domain.entities import FreshnessReport, Product
from ...domain.services.freshness_analyzer import FreshnessAnalyzer
from ...domain.value_objects import FreshnessThreshold

logger = logging.getLogger(__name__)


class CheckFreshness:
    """Use case for grouping products by freshness tier."""

    def __init__(self, threshold: FreshnessThreshold) -> None:
        """
        Initialize the use case.

        Args:
            threshold: Expiring-soon window, mirrors the user's reminder setting.
        """
        self._analyzer = FreshnessAnalyzer(threshold)

    @property
    def threshold(self) -> FreshnessThreshold:
        return self._analyzer.threshold

    def execute(self, products: list[Product], now: datetime | None = None) -> FreshnessReport:
        """
        Execute the freshness check.

        Returns:
            FreshnessReport for the given products.
        """
        logger.info("Checking freshness of %d products", len(products))
        report = self._analyzer.analyze(products, now)
        logger.info("Freshness check complete: %s", report.get_summary())
        return report
