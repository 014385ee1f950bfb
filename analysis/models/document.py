"""Document data models."""
from dataclasses import dataclass

@dataclass(frozen=True)
class PageBlock:
    """Raw text of a single page, as extracted from the source document."""
    page_index: int  # 1-indexed
    raw_text: str

@dataclass(frozen=True)
class Line:
    """A whitespace-squished line of a page. May be empty."""
    page_index: int
    text: str
