"""Services for the novel chapter & sentiment report."""
from .document_loader import DocumentLoader, ExtractionError
from .line_normalizer import LineNormalizer, EmptyRangeError
from .chapter_tagger import ChapterTagger, ChapterParseError
from .tokenizer import WordTokenizer
from .lexicon import load_stop_words, load_sentiment_lexicon
from .aggregator import Aggregator
from .report_pipeline import ReportPipeline

__all__ = ['DocumentLoader', 'ExtractionError', 'LineNormalizer', 'EmptyRangeError', 'ChapterTagger', 'ChapterParseError', 'WordTokenizer', 'load_stop_words', 'load_sentiment_lexicon', 'Aggregator', 'ReportPipeline']
