"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

import pytest

from expiry_tracker.application.label_payload import LabelPayload
from expiry_tracker.domain.entities import Product
from expiry_tracker.domain.value_objects import FreshnessThreshold


class StubLabelReader:
    """In-memory label reader returning a fixed payload."""

    def __init__(
        self,
        payload: LabelPayload | None = None,
        *,
        configured: bool = True,
        error: Exception | None = None,
    ) -> None:
        self.payload = payload or LabelPayload()
        self.configured = configured
        self.error = error
        self.calls: list[str] = []

    async def read_label(self, image_data: str) -> LabelPayload:
        self.calls.append(image_data)
        if self.error is not None:
            raise self.error
        return self.payload

    def is_configured(self) -> bool:
        return self.configured


@pytest.fixture
def make_reader() -> Callable[..., StubLabelReader]:
    """Factory for stub label readers."""
    return StubLabelReader


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant."""
    return datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def default_threshold() -> FreshnessThreshold:
    """Default freshness threshold."""
    return FreshnessThreshold(days=7)


@pytest.fixture
def expired_product(now: datetime) -> Product:
    """A product that has already expired."""
    return Product(
        id=uuid4(),
        name="Old Yogurt",
        expiry_date=(now - timedelta(days=5)).date(),
        category="Food",
    )


@pytest.fixture
def expiring_product(now: datetime) -> Product:
    """A product expiring within the default threshold."""
    return Product(
        id=uuid4(),
        name="Whole Milk",
        expiry_date=(now + timedelta(days=3)).date(),
        category="Beverage",
    )


@pytest.fixture
def fresh_product(now: datetime) -> Product:
    """A product far from expiry."""
    return Product(
        id=uuid4(),
        name="Canned Beans",
        expiry_date=date(2025, 9, 1),
        manufacturing_date=date(2024, 3, 1),
        category="Food",
    )


@pytest.fixture
def products(
    expired_product: Product, expiring_product: Product, fresh_product: Product
) -> list[Product]:
    """One product per tier, in fresh/expired/expiring order."""
    return [fresh_product, expired_product, expiring_product]
