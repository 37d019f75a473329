from health_insight.extraction.exceptions import ExtractionError, ExtractionErrorKind


class PdfExtractionError(ExtractionError):
    """Raised when the PDF parser cannot produce a page structure."""

    def __init__(self, message: str) -> None:
        super().__init__(message, kind=ExtractionErrorKind.MALFORMED_DOCUMENT)
