"""Use case for scanning a product label into dates."""

import logging
from dataclasses import dataclass

from ...domain.services import extract_dates
from ...domain.value_objects import ExtractedDates
from ..label_payload import LabelPayload
from ..ports import LabelReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Result of the scan use case."""

    payload: LabelPayload
    label_text: str
    dates: ExtractedDates

    @property
    def success(self) -> bool:
        """A scan without an expiry date requires manual entry."""
        return self.dates.has_expiry


class ScanProduct:
    """
    Use case for turning a label image or transcription into extracted dates.

    Orchestrates the label reader adapter and the date extractor.
    """

    def __init__(self, label_reader: LabelReader) -> None:
        """
        Initialize the use case.

        Args:
            label_reader: Adapter for reading label fields from images.
        """
        self._reader = label_reader

    @property
    def is_configured(self) -> bool:
        return self._reader.is_configured()

    async def execute(self, image_data: str) -> ScanResult:
        """
        Read a label image and extract its dates.

        Raises:
            LabelReaderError: If the label reader fails.
        """
        logger.info("Reading product label...")
        payload = await self._reader.read_label(image_data)
        return self._extract(payload)

    def extract_text(self, text: str) -> ScanResult:
        """Extract dates from an already transcribed label."""
        return self._extract(LabelPayload(raw_text=text))

    def _extract(self, payload: LabelPayload) -> ScanResult:
        label_text = payload.to_label_text()
        dates = extract_dates(label_text)

        if dates.has_expiry:
            logger.info(
                "Extracted dates: manufacturing=%s expiry=%s",
                dates.manufacturing_date,
                dates.expiry_date,
            )
        else:
            logger.warning("Could not detect expiry date, manual entry required")

        return ScanResult(payload=payload, label_text=label_text, dates=dates)
