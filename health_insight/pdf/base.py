from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters.

    Adapters only produce ordered text runs per page; joining is shared so
    every engine yields the same shape of text.
    """

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        All text runs across all pages are joined by single spaces, in
        document order (page 1 runs first, then page 2, ...).

        Raises:
            PdfExtractionError: if the document cannot be parsed.
        """
        pages = self.extract_runs(pdf_bytes)
        return " ".join(run for page in pages for run in page if run.strip())

    @abstractmethod
    def extract_runs(self, pdf_bytes: bytes) -> list[list[str]]:
        """Return the text runs of each page, in reading order.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
