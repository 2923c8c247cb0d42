"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import uuid4

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse

from ....application.exceptions import LabelReaderError
from ....application.use_cases import CheckFreshness, ScanProduct
from ....domain.entities import FreshnessReport, Product
from ....domain.services import classify, days_until_expiry, extract_dates
from ....domain.value_objects import FreshnessThreshold, FreshnessTier
from .models import (
    ClassifyRequest,
    ClassifyResponse,
    ErrorResponse,
    ExtractedDatesResponse,
    ExtractRequest,
    FreshnessRequest,
    FreshnessResponse,
    HealthResponse,
    ProductFreshnessResponse,
    ProductRequest,
    ScanRequest,
    ScanResponse,
    StatisticsResponse,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


def _to_product(item: ProductRequest) -> Product:
    """Convert an API product to a domain product."""
    return Product(
        id=item.id or uuid4(),
        name=item.name,
        expiry_date=item.expiry_date,
        manufacturing_date=item.manufacturing_date,
        category=item.category,
        notes=item.notes,
    )


def _report_to_response(
    report: FreshnessReport, tier: FreshnessTier | None, query: str
) -> FreshnessResponse:
    """Convert domain report to API response."""
    return FreshnessResponse(
        generated_at=report.generated_at,
        threshold_days=report.threshold.days,
        summary=report.get_summary(),
        statistics=StatisticsResponse(
            total_products=report.total_count,
            fresh_count=report.fresh_count,
            expiring_soon_count=report.expiring_soon_count,
            expired_count=report.expired_count,
        ),
        products=[
            ProductFreshnessResponse(
                id=p.id,
                name=p.name,
                category=p.category,
                expiry_date=p.expiry_date,
                tier=report.tier_of(p).value,
                days_until_expiry=report.days_until_expiry(p),
            )
            for p in report.filter_products(tier, query)
        ],
    )


def create_app(
    scan_product: ScanProduct,
    check_freshness: CheckFreshness,
    version: str = "1.0.0",
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        scan_product: Use case for scanning label images and text.
        check_freshness: Use case holding the configured default threshold.
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """
    default_threshold = check_freshness.threshold

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="Product Expiry Tracker API",
        description="Extract manufacturing and expiry dates from product labels "
        "and classify products as fresh, expiring soon, or expired.",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=version,
            timestamp=datetime.now(UTC),
        )

    @app.post(
        "/api/v1/extract",
        response_model=ExtractedDatesResponse,
        tags=["Dates"],
        summary="Extract dates from label text",
    )
    async def extract(request: ExtractRequest) -> ExtractedDatesResponse:
        dates = extract_dates(request.text)
        return ExtractedDatesResponse(
            manufacturing_date=dates.manufacturing_date,
            expiry_date=dates.expiry_date,
            scan_failed=not dates.has_expiry,
        )

    @app.post(
        "/api/v1/classify",
        response_model=ClassifyResponse,
        tags=["Freshness"],
        summary="Classify an expiry date",
    )
    async def classify_expiry(request: ClassifyRequest) -> ClassifyResponse:
        threshold_days = (
            request.threshold_days
            if request.threshold_days is not None
            else default_threshold.days
        )
        now = request.now or datetime.now(UTC)
        return ClassifyResponse(
            tier=classify(request.expiry_date, threshold_days, now).value,
            days_until_expiry=days_until_expiry(request.expiry_date, now),
            threshold_days=threshold_days,
        )

    @app.post(
        "/api/v1/freshness",
        response_model=FreshnessResponse,
        tags=["Freshness"],
        summary="Group products by freshness tier",
        description="Classify stored products, with the dashboard counts, "
        "optionally filtered by tier and name search.",
    )
    async def freshness(request: FreshnessRequest) -> FreshnessResponse:
        use_case = (
            check_freshness
            if request.threshold_days is None
            else CheckFreshness(FreshnessThreshold(days=request.threshold_days))
        )
        report = use_case.execute([_to_product(p) for p in request.products], request.now)
        tier = None if request.status == "all" else FreshnessTier(request.status)
        return _report_to_response(report, tier, request.query)

    @app.post(
        "/api/v1/scan",
        response_model=ScanResponse,
        tags=["Scan"],
        summary="Scan a product label image",
        responses={
            400: {"model": ErrorResponse, "description": "Missing image data"},
            502: {"model": ErrorResponse, "description": "Label reader failed"},
            503: {"model": ErrorResponse, "description": "Label reader not configured"},
        },
    )
    async def scan(request: ScanRequest) -> ScanResponse:
        if not request.image_base64:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Image data is required",
            )
        if not scan_product.is_configured:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Label reader is not configured",
            )

        try:
            result = await scan_product.execute(request.image_base64)
        except LabelReaderError as e:
            logger.exception("API: Label scan failed")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Label scan failed: {e}",
            ) from e

        return ScanResponse(
            success=result.success,
            message="Product scanned successfully"
            if result.success
            else "Could not detect expiry date. Please enter manually.",
            product_name=result.payload.product_name,
            category=result.payload.category,
            best_before_duration=result.payload.best_before_duration,
            manufacturing_date=result.dates.manufacturing_date,
            expiry_date=result.dates.expiry_date,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    return app
