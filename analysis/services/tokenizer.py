"""Word tokenization of chapter-tagged lines."""
import logging
import re
import unicodedata
from typing import List

from models.chapter import ChapterLine, Token

logger = logging.getLogger(__name__)

# Combining mark blocks; re's \w does not cover them (e.g. the dot left by "İ".lower())
MARKS = r"\u0300-\u036f\u1ab0-\u1aff\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f"
WORD_CHAR = rf"(?:[^\W_]|[{MARKS}])"
# Runs of letters/digits, joined across internal apostrophes ("don't", "o'clock")
WORD_RE = re.compile(rf"[^\W_]{WORD_CHAR}*(?:'[^\W_]{WORD_CHAR}*)*")
APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'"})


def tokenize_text(text: str) -> List[str]:
    """
    Split text into lowercase word tokens.

    Text is NFC-normalized and lowercased before segmentation so decomposed
    accents stay attached to their letters. Punctuation separates words,
    curly apostrophes are folded to "'" and tokens made only of decimal
    digits are discarded.
    """
    text = unicodedata.normalize("NFC", text.translate(APOSTROPHES)).lower()
    return [w for w in WORD_RE.findall(text) if not w.isdecimal()]


class WordTokenizer:
    """Explodes chapter lines into one token per word."""

    def tokenize(self, chapter_lines: List[ChapterLine]) -> List[Token]:
        """
        Tokenize chapter lines.

        Args:
            chapter_lines: Tagged lines in document order

        Returns:
            Tokens ordered by chapter, then by position within the line
        """
        tokens = [
            Token(chapter_number=line.chapter_number, word=word)
            for line in chapter_lines
            for word in tokenize_text(line.text)
        ]

        logger.info(f"Tokenized {len(chapter_lines)} lines into {len(tokens)} tokens")
        return tokens
