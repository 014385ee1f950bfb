"""Line normalization: page text to squished, in-range lines."""
import logging
import re
from typing import List, Optional

from models.document import Line, PageBlock

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")


class EmptyRangeError(Exception):
    """Raised when the configured page range yields no lines."""

    def __init__(self, first_page: int, last_page: Optional[int]):
        self.first_page = first_page
        self.last_page = last_page
        bound = last_page if last_page is not None else "end"
        super().__init__(f"Page range [{first_page}, {bound}] contains no lines")


def squish(text: str) -> str:
    """Collapse internal whitespace runs to a single space and trim the ends."""
    return WHITESPACE_RE.sub(" ", text).strip()


class LineNormalizer:
    """Splits pages into lines and restricts them to the in-scope page range."""

    def __init__(self, first_page: int = 1, last_page: Optional[int] = None):
        """
        Initialize LineNormalizer.

        Args:
            first_page: First in-scope page (inclusive, 1-indexed)
            last_page: Last in-scope page (inclusive), or None for the final page
        """
        if first_page < 1:
            raise ValueError(f"first_page must be >= 1, got {first_page}")
        if last_page is not None and last_page < first_page:
            raise ValueError(f"last_page ({last_page}) must not precede first_page ({first_page})")

        self.first_page = first_page
        self.last_page = last_page

    def in_range(self, page_index: int) -> bool:
        if page_index < self.first_page:
            return False
        return self.last_page is None or page_index <= self.last_page

    def normalize(self, pages: List[PageBlock]) -> List[Line]:
        """
        Convert in-range pages into ordered lines.

        Empty fragments are kept as empty-string lines so positions survive.

        Args:
            pages: Extracted pages in document order

        Returns:
            Lines in page order, then original line order

        Raises:
            EmptyRangeError: If no line falls inside the page range
        """
        lines = []
        kept_pages = 0

        for page in pages:
            if not self.in_range(page.page_index):
                continue

            kept_pages += 1
            for fragment in page.raw_text.split("\n"):
                lines.append(Line(page_index=page.page_index, text=squish(fragment)))

        if not lines:
            raise EmptyRangeError(self.first_page, self.last_page)

        logger.info(f"Normalized {kept_pages} of {len(pages)} pages into {len(lines)} lines")
        return lines
