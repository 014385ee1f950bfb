"""End-to-end pipeline: PDF to report aggregates."""
import logging
import time
from typing import Optional

from config import (
    FIRST_PAGE,
    LAST_PAGE,
    LEXICON_PATH,
    SOURCE_PATH,
    STOP_WORDS_PATH,
    TOP_N_WORDS,
)
from models.aggregate import ReportData
from services.aggregator import Aggregator
from services.chapter_tagger import ChapterTagger
from services.document_loader import DocumentLoader
from services.lexicon import load_sentiment_lexicon, load_stop_words
from services.line_normalizer import LineNormalizer
from services.tokenizer import WordTokenizer

logger = logging.getLogger(__name__)


class ReportPipeline:
    """Runs extraction, normalization, tagging, tokenization and aggregation in order."""

    def __init__(
        self,
        source_path: str = SOURCE_PATH,
        first_page: int = FIRST_PAGE,
        last_page: Optional[int] = LAST_PAGE,
        top_n_words: int = TOP_N_WORDS,
        stop_words_path: str = STOP_WORDS_PATH,
        lexicon_path: str = LEXICON_PATH
    ):
        """
        Initialize ReportPipeline.

        Lookup tables are loaded eagerly so a bad path fails before the PDF is read.

        Args:
            source_path: PDF to analyse
            first_page: First in-scope page (inclusive)
            last_page: Last in-scope page (inclusive), None for the final page
            top_n_words: Cap on the word-frequency ranking
            stop_words_path: Stop-word list file
            lexicon_path: Sentiment lexicon file
        """
        self.source_path = source_path
        self.loader = DocumentLoader(source_path)
        self.normalizer = LineNormalizer(first_page=first_page, last_page=last_page)
        self.tokenizer = WordTokenizer()
        self.aggregator = Aggregator(
            stop_words=load_stop_words(stop_words_path),
            lexicon=load_sentiment_lexicon(lexicon_path),
            top_n_words=top_n_words
        )

    def _stage_done(self, stage: str, started: float, produced: int) -> None:
        logger.info(
            f"Stage {stage} produced {produced} records",
            extra={"stage": stage, "extra": {
                "produced": produced,
                "elapsed_ms": int((time.time() - started) * 1000),
            }}
        )

    def run(self) -> ReportData:
        """
        Produce the report aggregates for the configured document.

        Raises:
            ExtractionError: If the document cannot be read
            EmptyRangeError: If the page range contains no lines
        """
        start_time = time.time()

        logger.info(f"[1/5] Extracting pages from {self.source_path}", extra={"stage": "extract"})
        started = time.time()
        pages = self.loader.load_pages()
        self._stage_done("extract", started, len(pages))

        logger.info("[2/5] Normalizing lines", extra={"stage": "normalize"})
        started = time.time()
        lines = self.normalizer.normalize(pages)
        self._stage_done("normalize", started, len(lines))

        logger.info("[3/5] Tagging chapters", extra={"stage": "tag"})
        started = time.time()
        tagger = ChapterTagger()
        chapter_lines = tagger.tag(lines)
        self._stage_done("tag", started, len(chapter_lines))

        logger.info("[4/5] Tokenizing", extra={"stage": "tokenize"})
        started = time.time()
        tokens = self.tokenizer.tokenize(chapter_lines)
        self._stage_done("tokenize", started, len(tokens))

        logger.info("[5/5] Aggregating", extra={"stage": "aggregate"})
        started = time.time()
        report = self.aggregator.aggregate(tokens, skipped_headings=tagger.skipped_headings)
        self._stage_done(
            "aggregate",
            started,
            len(report.chapter_counts) + len(report.word_frequencies) + len(report.sentiment_counts)
        )

        elapsed_ms = int((time.time() - start_time) * 1000)
        logger.info(
            "Report pipeline complete",
            extra={"extra": {
                "source_path": self.source_path,
                "pages": len(pages),
                "lines": len(lines),
                "chapter_lines": len(chapter_lines),
                "tokens": report.total_tokens,
                "chapters": len(report.chapter_counts),
                "skipped_headings": report.skipped_headings,
                "elapsed_ms": elapsed_ms,
            }}
        )
        return report
