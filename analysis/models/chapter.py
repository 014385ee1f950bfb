"""Chapter-tagged text models."""
from dataclasses import dataclass

@dataclass(frozen=True)
class ChapterLine:
    """A line annotated with the chapter it belongs to."""
    chapter_number: int
    text: str

@dataclass(frozen=True)
class Token:
    """A single lowercase word from a chapter line."""
    chapter_number: int
    word: str
