#!/usr/bin/env python3
"""
Product Expiry Tracker

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import TextIO

from . import __version__
from .application.use_cases import CheckFreshness, ScanProduct
from .infrastructure.adapters import GatewayLabelReader
from .infrastructure.config import Settings, load_settings

# Configure logging; stdout carries extract-mode output
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_label_reader(self) -> GatewayLabelReader:
        """Create the label reader adapter."""
        reader = GatewayLabelReader(self._settings.gateway_config)
        logger.info("Label reader configured: %s", reader.is_configured())
        return reader

    def create_scan_use_case(self) -> ScanProduct:
        """Create the scan use case."""
        return ScanProduct(label_reader=self.create_label_reader())

    def create_freshness_use_case(self) -> CheckFreshness:
        """Create the freshness check use case."""
        return CheckFreshness(threshold=self._settings.threshold)


class Application:
    """
    Main application orchestrator.

    Handles run modes (API server or one-shot extraction).
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    def run_extract(self, source: TextIO, sink: TextIO) -> int:
        """Extract dates from label text on source and write JSON to sink."""
        use_case = self._container.create_scan_use_case()
        result = use_case.extract_text(source.read())
        dates = result.dates

        json.dump(
            {
                "manufacturing_date": dates.manufacturing_date.isoformat()
                if dates.manufacturing_date
                else None,
                "expiry_date": dates.expiry_date.isoformat() if dates.expiry_date else None,
                "scan_failed": not result.success,
            },
            sink,
        )
        sink.write("\n")
        return 0 if result.success else 1

    def run_api(self) -> None:
        """Run in API server mode."""
        import uvicorn

        from .infrastructure.adapters.api import create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(
            scan_product=self._container.create_scan_use_case(),
            check_freshness=self._container.create_freshness_use_case(),
            version=__version__,
        )

        uvicorn.run(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
        )

    def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        match self._settings.run_mode.lower():
            case "api":
                self.run_api()
                return 0

            case "extract":
                return self.run_extract(sys.stdin, sys.stdout)

            case _:
                logger.error(
                    "Invalid RUN_MODE: %s (use 'api' or 'extract')",
                    self._settings.run_mode,
                )
                return 1


def run_main() -> int:
    """Entry point returning an exit code."""
    try:
        logger.info("Product Expiry Tracker starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return app.run()

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    sys.exit(run_main())


if __name__ == "__main__":
    main()
