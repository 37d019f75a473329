from typing import ClassVar

from health_insight.config.settings import Settings
from health_insight.logging.logger import Log
from health_insight.pdf.base import BasePdfExtractor
from health_insight.pdf.pdfplumber_adapter import PdfPlumberAdapter
from health_insight.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Maps ``settings.pdf_engine`` to a PDF text layer reader."""

    ADAPTERS: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }
    # Legacy import name of PyMuPDF.
    ALIASES: ClassVar[dict[str, str]] = {"fitz": "pymupdf"}

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        return cls.for_engine(settings.pdf_engine)

    @classmethod
    def for_engine(cls, name: str) -> BasePdfExtractor:
        engine = name.strip().lower()
        engine = cls.ALIASES.get(engine, engine)
        try:
            adapter_cls = cls.ADAPTERS[engine]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{name}'. Choose from: {sorted(cls.ADAPTERS)}"
            ) from None
        Log.debug(f"Using PDF engine {engine}")
        return adapter_cls()
