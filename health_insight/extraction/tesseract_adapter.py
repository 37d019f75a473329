import asyncio
import io

import pytesseract
from PIL import Image

from health_insight.extraction.exceptions import ExtractionError, ExtractionErrorKind
from health_insight.extraction.image_base import BaseImageExtractor
from health_insight.extraction.models import MediaType


class TesseractAdapter(BaseImageExtractor):
    """Extracts text from images with the local Tesseract OCR engine."""

    def __init__(self, lang: str = "eng") -> None:
        self._lang = lang

    async def extract(self, image_bytes: bytes, media_type: MediaType) -> str:
        _ = media_type
        return await asyncio.to_thread(self._recognize, image_bytes)

    def _recognize(self, image_bytes: bytes) -> str:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                image.load()
                return pytesseract.image_to_string(image, lang=self._lang).strip()
        except Exception as exc:
            raise ExtractionError(
                f"tesseract OCR failed: {exc}", kind=ExtractionErrorKind.OCR_FAILURE
            ) from exc
