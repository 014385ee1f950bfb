"""Data models for the novel chapter & sentiment report."""
from .document import PageBlock, Line
from .chapter import ChapterLine, Token
from .aggregate import ChapterWordCount, WordFrequency, SentimentCount, ReportData

__all__ = [
    "PageBlock",
    "Line",
    "ChapterLine",
    "Token",
    "ChapterWordCount",
    "WordFrequency",
    "SentimentCount",
    "ReportData",
]
