import io

import pdfplumber

from health_insight.pdf.base import BasePdfExtractor
from health_insight.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts word runs from PDF using pdfplumber."""

    def extract_runs(self, pdf_bytes: bytes) -> list[list[str]]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [
                    [word["text"] for word in page.extract_words()]
                    for page in pdf.pages
                ]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
