"""Tests for the HTTP API adapter."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from expiry_tracker.application.exceptions import LabelReaderError
from expiry_tracker.application.label_payload import LabelPayload
from expiry_tracker.application.ports import LabelReader
from expiry_tracker.application.use_cases import CheckFreshness, ScanProduct
from expiry_tracker.domain.value_objects import FreshnessThreshold
from expiry_tracker.infrastructure.adapters.api import create_app

NOW = "2024-01-01T00:00:00Z"
IMAGE = "data:image/jpeg;base64,AAAA"


def _client(reader: LabelReader, threshold_days: int = 7) -> TestClient:
    app = create_app(
        scan_product=ScanProduct(reader),
        check_freshness=CheckFreshness(FreshnessThreshold(days=threshold_days)),
        version="9.9.9",
    )
    return TestClient(app)


@pytest.fixture
def client(make_reader: Callable[..., LabelReader]) -> TestClient:
    return _client(make_reader())


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "9.9.9"


class TestExtract:
    """Tests for the extract endpoint."""

    def test_extract_dates(self, client: TestClient) -> None:
        response = client.post("/api/v1/extract", json={"text": "MFG: 03/2024\nEXP: 09/2025"})
        assert response.status_code == 200
        assert response.json() == {
            "manufacturing_date": "2024-03-01",
            "expiry_date": "2025-09-01",
            "scan_failed": False,
        }

    def test_extract_without_expiry_reports_failed_scan(self, client: TestClient) -> None:
        response = client.post("/api/v1/extract", json={"text": "best before 2 years"})
        assert response.status_code == 200
        body = response.json()
        assert body["manufacturing_date"] is None
        assert body["expiry_date"] is None
        assert body["scan_failed"] is True


class TestClassify:
    """Tests for the classify endpoint."""

    @pytest.mark.parametrize(
        ("expiry", "tier", "days"),
        [
            ("2024-01-08T00:00:00Z", "expiring-soon", 7),
            ("2024-01-09T00:00:00Z", "fresh", 8),
            ("2023-12-31T00:00:00Z", "expired", -1),
        ],
    )
    def test_boundaries(self, client: TestClient, expiry: str, tier: str, days: int) -> None:
        response = client.post("/api/v1/classify", json={"expiry_date": expiry, "now": NOW})
        assert response.status_code == 200
        assert response.json() == {"tier": tier, "days_until_expiry": days, "threshold_days": 7}

    def test_explicit_threshold(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/classify",
            json={"expiry_date": "2024-01-20", "threshold_days": 30, "now": NOW},
        )
        assert response.status_code == 200
        assert response.json()["tier"] == "expiring-soon"
        assert response.json()["threshold_days"] == 30

    def test_configured_default_threshold(self, make_reader: Callable[..., LabelReader]) -> None:
        client = _client(make_reader(), threshold_days=30)
        response = client.post("/api/v1/classify", json={"expiry_date": "2024-01-20", "now": NOW})
        assert response.json()["tier"] == "expiring-soon"

    def test_negative_threshold_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/classify",
            json={"expiry_date": "2024-01-20", "threshold_days": -1, "now": NOW},
        )
        assert response.status_code == 422


class TestFreshness:
    """Tests for the freshness endpoint."""

    PRODUCTS = [
        {"name": "Canned Beans", "expiry_date": "2025-09-01", "category": "Food"},
        {"name": "Old Yogurt", "expiry_date": "2023-12-27"},
        {"name": "Whole Milk", "expiry_date": "2024-01-04"},
    ]

    def test_report(self, client: TestClient) -> None:
        response = client.post("/api/v1/freshness", json={"products": self.PRODUCTS, "now": NOW})
        assert response.status_code == 200
        body = response.json()
        assert body["statistics"] == {
            "total_products": 3,
            "fresh_count": 1,
            "expiring_soon_count": 1,
            "expired_count": 1,
        }
        assert body["threshold_days"] == 7
        assert [p["tier"] for p in body["products"]] == ["fresh", "expired", "expiring-soon"]
        assert [p["days_until_expiry"] for p in body["products"]][1:] == [-5, 3]

    def test_filter_by_status(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/freshness",
            json={"products": self.PRODUCTS, "status": "expiring-soon", "now": NOW},
        )
        body = response.json()
        assert [p["name"] for p in body["products"]] == ["Whole Milk"]
        assert body["statistics"]["total_products"] == 3

    def test_filter_by_query(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/freshness",
            json={"products": self.PRODUCTS, "query": "YOG", "now": NOW},
        )
        assert [p["name"] for p in response.json()["products"]] == ["Old Yogurt"]

    def test_threshold_override(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/freshness",
            json={"products": self.PRODUCTS, "threshold_days": 0, "now": NOW},
        )
        body = response.json()
        assert body["threshold_days"] == 0
        assert body["statistics"]["expiring_soon_count"] == 0

    def test_unknown_status_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/freshness", json={"products": self.PRODUCTS, "status": "stale"}
        )
        assert response.status_code == 422


class TestScan:
    """Tests for the scan endpoint."""

    def test_scan_success(self, make_reader: Callable[..., LabelReader]) -> None:
        reader = make_reader(
            LabelPayload(
                product_name="Oat Biscuits",
                manufacturing_date="03/2024",
                best_before_duration="18 months",
                category="Food",
            )
        )
        response = _client(reader).post("/api/v1/scan", json={"image_base64": IMAGE})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["product_name"] == "Oat Biscuits"
        assert body["category"] == "Food"
        assert body["manufacturing_date"] == "2024-03-01"
        assert body["expiry_date"] == "2025-09-01"

    def test_scan_with_only_expiry(self, make_reader: Callable[..., LabelReader]) -> None:
        reader = make_reader(LabelPayload(product_name="Whole Milk", expiry_date="09/2025"))
        response = _client(reader).post("/api/v1/scan", json={"image_base64": IMAGE})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["expiry_date"] == "2025-09-01"
        assert body["manufacturing_date"] is None

    def test_scan_without_expiry(self, make_reader: Callable[..., LabelReader]) -> None:
        reader = make_reader(LabelPayload(product_name="Mystery"))
        response = _client(reader).post("/api/v1/scan", json={"image_base64": IMAGE})
        assert response.status_code == 200
        assert response.json()["success"] is False
        assert "manually" in response.json()["message"]

    def test_missing_image(self, client: TestClient) -> None:
        response = client.post("/api/v1/scan", json={})
        assert response.status_code == 400
        assert response.json()["detail"] == "Image data is required"

    def test_reader_not_configured(self, make_reader: Callable[..., LabelReader]) -> None:
        response = _client(make_reader(configured=False)).post(
            "/api/v1/scan", json={"image_base64": IMAGE}
        )
        assert response.status_code == 503

    def test_reader_failure(self, make_reader: Callable[..., LabelReader]) -> None:
        reader = make_reader(error=LabelReaderError("AI processing failed: 500"))
        response = _client(reader).post("/api/v1/scan", json={"image_base64": IMAGE})
        assert response.status_code == 502
        assert "AI processing failed" in response.json()["detail"]
