import pymupdf

from health_insight.pdf.base import BasePdfExtractor
from health_insight.pdf.exceptions import PdfExtractionError

# (x0, y0, x1, y1, word, block_no, line_no, word_no)
_WORD_TEXT_INDEX = 4


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts word runs from PDF using PyMuPDF."""

    def extract_runs(self, pdf_bytes: bytes) -> list[list[str]]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [
                    [word[_WORD_TEXT_INDEX] for word in page.get_text("words", sort=True)]
                    for page in doc
                ]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
