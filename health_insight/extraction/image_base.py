from abc import ABC, abstractmethod

from health_insight.extraction.models import MediaType


class BaseImageExtractor(ABC):
    """Contract for image-to-text strategies (local OCR engine or vision model)."""

    @abstractmethod
    async def extract(self, image_bytes: bytes, media_type: MediaType) -> str:
        """Recognize the text visible in an image.

        Returns:
            The recognized text; positional data is discarded.

        Raises:
            ExtractionError: on any recognition failure.
        """
