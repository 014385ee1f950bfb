"""Document loading service for PDF text extraction."""
import logging
import os
from typing import List
import fitz  # PyMuPDF

from models.document import PageBlock

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when a source document cannot be turned into page text."""

    def __init__(self, source_path: str, reason: str):
        self.source_path = source_path
        self.reason = reason
        super().__init__(f"Cannot extract text from {source_path}: {reason}")


class DocumentLoader:
    """Extracts page-level text from a PDF file."""

    def __init__(self, source_path: str):
        """
        Initialize DocumentLoader.

        Args:
            source_path: Path to the PDF file to read
        """
        self.source_path = source_path

    def load_pages(self) -> List[PageBlock]:
        """
        Extract text page-by-page.

        The document is opened once, read fully, and closed before returning.

        Returns:
            One PageBlock per physical page, in page order starting at 1

        Raises:
            ExtractionError: If the file is missing, unreadable, encrypted,
                empty, or has no extractable text layer
        """
        if not os.path.exists(self.source_path):
            raise ExtractionError(self.source_path, "file not found")

        try:
            pdf_document = fitz.open(self.source_path)
        except Exception as e:
            logger.error(f"Failed to open PDF {self.source_path}: {str(e)}")
            raise ExtractionError(self.source_path, f"unreadable document ({e})") from e

        with pdf_document:
            if pdf_document.needs_pass or pdf_document.is_encrypted:
                raise ExtractionError(self.source_path, "document is encrypted")

            if pdf_document.page_count == 0:
                raise ExtractionError(self.source_path, "document has no pages")

            pages = [
                PageBlock(page_index=page_num + 1, raw_text=page.get_text())
                for page_num, page in enumerate(pdf_document)
            ]

        if not any(page.raw_text.strip() for page in pages):
            # Image-only scans land here
            raise ExtractionError(self.source_path, "no extractable text layer")

        logger.info(f"Loaded {self.source_path}: {len(pages)} pages")
        return pages
