from enum import Enum


class ExtractionErrorKind(str, Enum):
    MALFORMED_DOCUMENT = "malformed_document"
    OCR_FAILURE = "ocr_failure"
    VISION_FAILURE = "vision_failure"
    RATE_LIMITED = "rate_limited"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    NO_TEXT_FOUND = "no_text_found"


class ExtractionError(Exception):
    """Raised when text cannot be extracted from an uploaded artifact."""

    def __init__(self, message: str, kind: ExtractionErrorKind) -> None:
        super().__init__(message)
        self.kind = kind

    @property
    def rate_limited(self) -> bool:
        return self.kind is ExtractionErrorKind.RATE_LIMITED
