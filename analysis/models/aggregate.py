"""Aggregate data models consumed by the report renderer."""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

@dataclass(frozen=True)
class ChapterWordCount:
    """Number of tokens in one chapter."""
    chapter_number: int
    count: int

@dataclass(frozen=True)
class WordFrequency:
    """Occurrences of a non-stop-word across the in-scope text."""
    word: str
    count: int

@dataclass(frozen=True)
class SentimentCount:
    """Matched token occurrences for one sentiment category."""
    category: str
    count: int

@dataclass(frozen=True)
class ReportData:
    """Everything the report is built from."""
    chapter_counts: List[ChapterWordCount] = field(default_factory=list)
    word_frequencies: List[WordFrequency] = field(default_factory=list)
    sentiment_counts: List[SentimentCount] = field(default_factory=list)
    total_tokens: int = 0
    skipped_headings: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view used for the JSON summary."""
        return asdict(self)
