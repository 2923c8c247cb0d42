"""Port for label reading - driven/secondary port."""

from typing import Protocol

from ..label_payload import LabelPayload


class LabelReader(Protocol):
    """
    Port for reading product labels from images.

    This is a driven (secondary) port that defines how the application
    obtains label fields from an external OCR/vision service.
    """

    async def read_label(self, image_data: str) -> LabelPayload:
        """
        Read label fields from an image.

        Args:
            image_data: Image as a base64 data URL.

        Returns:
            The fields the service could read.

        Raises:
            LabelReaderError: If the service fails or returns garbage.
        """
        ...

    def is_configured(self) -> bool:
        """
        Check if this reader is properly configured.

        Returns:
            True if the reader is ready to read labels.
        """
        ...
