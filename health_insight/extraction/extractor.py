import asyncio

from health_insight.extraction.exceptions import ExtractionError, ExtractionErrorKind
from health_insight.extraction.image_base import BaseImageExtractor
from health_insight.extraction.models import Artifact, MediaType
from health_insight.logging.logger import Log
from health_insight.pdf.base import BasePdfExtractor


class TextExtractor:
    """Turns an uploaded artifact into a single normalized text blob."""

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        image_extractor: BaseImageExtractor,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._image_extractor = image_extractor

    async def extract(self, artifact: Artifact) -> str:
        """Extract text from a PDF or image artifact.

        Raises:
            ExtractionError: when the strategy fails or finds no text at all.
        """
        if artifact.media_type is MediaType.PDF:
            # PDF parsers are blocking; keep them off the event loop.
            text = await asyncio.to_thread(self._pdf_extractor.extract, artifact.data)
            strategy = type(self._pdf_extractor).__name__
        else:
            text = await self._image_extractor.extract(artifact.data, artifact.media_type)
            strategy = type(self._image_extractor).__name__

        text = text.strip()
        if not text:
            raise ExtractionError(
                f"No text found in {artifact.media_type.value} artifact",
                kind=ExtractionErrorKind.NO_TEXT_FOUND,
            )
        Log.info(
            f"Extracted {len(text)} chars from {artifact.media_type.value} artifact",
            strategy=strategy,
        )
        return text
