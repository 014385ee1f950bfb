"""Aggregations over word tokens: chapter counts, word frequencies, sentiment."""
import logging
from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Tuple

from config import TOP_N_WORDS
from models.aggregate import ChapterWordCount, ReportData, SentimentCount, WordFrequency
from models.chapter import Token

logger = logging.getLogger(__name__)


class Aggregator:
    """Reduces tokens into the three report aggregates."""

    def __init__(
        self,
        stop_words: Iterable[str],
        lexicon: Dict[str, Tuple[str, ...]],
        top_n_words: int = TOP_N_WORDS
    ):
        """
        Initialize Aggregator.

        Args:
            stop_words: Words excluded from frequency and sentiment analysis
            lexicon: Mapping of word to its sentiment categories
            top_n_words: Maximum number of rows in the word-frequency ranking
        """
        if top_n_words < 1:
            raise ValueError(f"top_n_words must be >= 1, got {top_n_words}")

        self.stop_words: FrozenSet[str] = frozenset(stop_words)
        self.lexicon = lexicon
        self.top_n_words = top_n_words

    def filter_stop_words(self, tokens: List[Token]) -> List[Token]:
        return [t for t in tokens if t.word not in self.stop_words]

    def chapter_word_counts(self, tokens: List[Token]) -> List[ChapterWordCount]:
        """
        Count all tokens per chapter (stop words included).

        Returns:
            One row per chapter present, ascending by chapter number
        """
        counts = Counter(t.chapter_number for t in tokens)
        return [
            ChapterWordCount(chapter_number=chapter, count=count)
            for chapter, count in sorted(counts.items())
        ]

    def word_frequencies(self, tokens: List[Token]) -> List[WordFrequency]:
        """
        Rank non-stop-words by global frequency.

        Returns:
            At most ``top_n_words`` rows, descending by count; equal counts
            keep the order in which the words were first seen
        """
        counts = Counter(t.word for t in self.filter_stop_words(tokens))
        # sorted() is stable and Counter preserves first-seen order
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [
            WordFrequency(word=word, count=count)
            for word, count in ranked[:self.top_n_words]
        ]

    def sentiment_counts(self, tokens: List[Token]) -> List[SentimentCount]:
        """
        Join non-stop-words against the lexicon and count per category.

        A token whose word maps to several categories counts once for each.

        Returns:
            One row per matched category, descending by count, then by name
        """
        counts: Counter = Counter()
        for token in self.filter_stop_words(tokens):
            for category in self.lexicon.get(token.word, ()):
                counts[category] += 1

        return [
            SentimentCount(category=category, count=count)
            for category, count in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        ]

    def aggregate(self, tokens: List[Token], skipped_headings: int = 0) -> ReportData:
        """Compute all three aggregates in one call."""
        report = ReportData(
            chapter_counts=self.chapter_word_counts(tokens),
            word_frequencies=self.word_frequencies(tokens),
            sentiment_counts=self.sentiment_counts(tokens),
            total_tokens=len(tokens),
            skipped_headings=skipped_headings
        )

        logger.info(
            f"Aggregated {report.total_tokens} tokens: "
            f"{len(report.chapter_counts)} chapters, "
            f"{len(report.word_frequencies)} ranked words, "
            f"{len(report.sentiment_counts)} sentiment categories"
        )
        return report
