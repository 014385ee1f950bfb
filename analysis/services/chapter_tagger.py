"""Chapter detection and forward-fill of chapter numbers onto lines."""
import logging
import re
from typing import List, Optional

from models.chapter import ChapterLine
from models.document import Line

logger = logging.getLogger(__name__)

# Case-sensitive, whole word
HEADING_RE = re.compile(r"\bChapter\b")


class ChapterParseError(Exception):
    """Raised when a heading line carries an unusable chapter designator."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse chapter heading {text!r}: {reason}")


def is_heading(text: str) -> bool:
    """Check whether a line contains the literal word 'Chapter'."""
    return bool(HEADING_RE.search(text))


def parse_chapter_number(text: str) -> int:
    """
    Parse the chapter number out of a heading line.

    The heading is split on its first space into a label and a designator;
    only the first field of the designator is read. "I" maps to 1, anything
    else must be a base-10 integer >= 1.

    Args:
        text: Squished heading text, e.g. "Chapter 12"

    Returns:
        Chapter number

    Raises:
        ChapterParseError: If the designator is missing or not "I" / an integer
    """
    _, _, remainder = text.partition(" ")
    fields = remainder.split()
    if not fields:
        raise ChapterParseError(text, "missing designator")

    designator = fields[0]
    if designator == "I":
        return 1

    # Only plain ASCII digits; int() would also accept signs and other scripts
    if not designator.isascii() or not designator.isdigit():
        raise ChapterParseError(text, f"unsupported designator {designator!r}")

    number = int(designator)
    if number < 1:
        raise ChapterParseError(text, f"chapter number {number} is below 1")
    return number


class ChapterTagger:
    """Assigns every line the number of the nearest preceding chapter heading."""

    def __init__(self):
        self.skipped_headings = 0

    def tag(self, lines: List[Line]) -> List[ChapterLine]:
        """
        Forward-fill chapter numbers onto lines.

        Lines before the first heading are dropped. Headings that fail to
        parse, or that would move the chapter number backwards, are logged,
        counted in ``skipped_headings`` and dropped without touching the
        current chapter.

        Args:
            lines: Normalized lines in document order

        Returns:
            Chapter-tagged lines in input order
        """
        current_chapter: Optional[int] = None
        tagged = []
        dropped_front = 0

        for line in lines:
            if is_heading(line.text):
                try:
                    number = parse_chapter_number(line.text)
                    if current_chapter is not None and number < current_chapter:
                        raise ChapterParseError(
                            line.text,
                            f"chapter {number} appears after chapter {current_chapter}"
                        )
                except ChapterParseError as e:
                    self.skipped_headings += 1
                    logger.warning(f"Skipping heading on page {line.page_index}: {e}")
                    continue
                current_chapter = number

            if current_chapter is None:
                dropped_front += 1
                continue

            tagged.append(ChapterLine(chapter_number=current_chapter, text=line.text))

        if dropped_front:
            logger.info(f"Dropped {dropped_front} lines before the first chapter heading")
        logger.info(
            f"Tagged {len(tagged)} lines across "
            f"{len({l.chapter_number for l in tagged})} chapters "
            f"({self.skipped_headings} headings skipped)"
        )
        return tagged
