from health_insight.extraction.exceptions import ExtractionError, ExtractionErrorKind
from health_insight.extraction.extractor import TextExtractor
from health_insight.extraction.models import Artifact, MediaType

__all__ = [
    "Artifact",
    "ExtractionError",
    "ExtractionErrorKind",
    "MediaType",
    "TextExtractor",
]
