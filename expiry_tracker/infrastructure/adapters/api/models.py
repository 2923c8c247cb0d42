"""API request and response models."""

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

TierFilter = Literal["all", "fresh", "expiring-soon", "expired"]


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class ExtractRequest(BaseModel):
    """Label text to extract dates from."""

    text: str = Field(description="Free-text label transcription")


class ExtractedDatesResponse(BaseModel):
    """Dates inferred from a label."""

    manufacturing_date: date | None = None
    expiry_date: date | None = None
    scan_failed: bool = Field(description="True when no expiry date was found; enter it manually")


class ClassifyRequest(BaseModel):
    """Expiry date to classify."""

    expiry_date: datetime | date
    threshold_days: int | None = Field(default=None, ge=0, description="Defaults to the configured threshold")
    now: datetime | None = Field(default=None, description="Reference instant, defaults to the current time")


class ClassifyResponse(BaseModel):
    """Freshness classification result."""

    tier: Literal["fresh", "expiring-soon", "expired"]
    days_until_expiry: int
    threshold_days: int


class ProductRequest(BaseModel):
    """A stored product to classify."""

    id: UUID | None = None
    name: str
    expiry_date: datetime | date
    manufacturing_date: datetime | date | None = None
    category: str | None = None
    notes: str | None = None


class FreshnessRequest(BaseModel):
    """Products to group by freshness tier."""

    products: list[ProductRequest] = Field(default_factory=list)
    threshold_days: int | None = Field(default=None, ge=0, description="Defaults to the configured threshold")
    status: TierFilter = "all"
    query: str = Field(default="", description="Case-insensitive product name search")
    now: datetime | None = None


class ProductFreshnessResponse(BaseModel):
    """A product with its freshness tier."""

    id: UUID
    name: str
    category: str | None = None
    expiry_date: datetime | date
    tier: Literal["fresh", "expiring-soon", "expired"]
    days_until_expiry: int


class StatisticsResponse(BaseModel):
    """Product counts per tier (over all products, not only the filtered ones)."""

    total_products: int
    fresh_count: int
    expiring_soon_count: int
    expired_count: int


class FreshnessResponse(BaseModel):
    """Freshness report."""

    generated_at: datetime
    threshold_days: int
    summary: str
    statistics: StatisticsResponse
    products: list[ProductFreshnessResponse]


class ScanRequest(BaseModel):
    """Label image to scan."""

    image_base64: str = Field(default="", description="Image as a base64 data URL")


class ScanResponse(BaseModel):
    """Result of scanning a label image."""

    success: bool
    message: str
    product_name: str | None = None
    category: str | None = None
    best_before_duration: str | None = None
    manufacturing_date: date | None = None
    expiry_date: date | None = None


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
