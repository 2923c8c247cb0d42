"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import ExtractedDatesResponse, FreshnessResponse, HealthResponse, ScanResponse

__all__ = [
    "ExtractedDatesResponse",
    "FreshnessResponse",
    "HealthResponse",
    "ScanResponse",
    "create_app",
]
