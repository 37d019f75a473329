from dataclasses import dataclass
from enum import Enum

from health_insight.extraction.exceptions import ExtractionError, ExtractionErrorKind

_ALIASES = {"image/jpg": "image/jpeg"}


class MediaType(str, Enum):
    """Allow-listed media types for uploaded reports."""

    JPEG = "image/jpeg"
    PNG = "image/png"
    WEBP = "image/webp"
    PDF = "application/pdf"

    @property
    def is_image(self) -> bool:
        return self is not MediaType.PDF

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """Resolve a MIME string to an allow-listed media type.

        Raises:
            ExtractionError: with kind UNSUPPORTED_MEDIA_TYPE for anything else.
        """
        normalized = value.strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            supported = [m.value for m in cls]
            raise ExtractionError(
                f"Unsupported media type '{value}'. Choose from: {supported}",
                kind=ExtractionErrorKind.UNSUPPORTED_MEDIA_TYPE,
            ) from None


@dataclass(frozen=True)
class Artifact:
    """An uploaded file handed over by the transport layer."""

    data: bytes
    media_type: MediaType

    def __repr__(self) -> str:
        return f"Artifact(media_type={self.media_type.value!r}, size={len(self.data)})"
