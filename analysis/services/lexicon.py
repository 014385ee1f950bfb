"""Loaders for the stop-word list and the word-to-sentiment lexicon."""
import logging
from pathlib import Path
from typing import Dict, FrozenSet, List, Tuple, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_rows(path: PathLike) -> List[Tuple[int, str]]:
    """Return (line_number, text) for non-blank, non-comment lines."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Lookup table not found: {path}")

    rows = []
    with path.open(encoding="utf-8") as handle:
        for line_number, raw in enumerate(handle, start=1):
            text = raw.strip()
            if not text or text.startswith("#"):
                continue
            rows.append((line_number, text))
    return rows


def load_stop_words(path: PathLike) -> FrozenSet[str]:
    """
    Load a stop-word list, one word per line.

    Args:
        path: Text file with one word per line; "#" starts a comment line

    Returns:
        Lowercased stop words
    """
    stop_words = frozenset(text.lower() for _, text in _read_rows(path))
    logger.info(f"Loaded {len(stop_words)} stop words from {path}")
    return stop_words


def load_sentiment_lexicon(path: PathLike) -> Dict[str, Tuple[str, ...]]:
    """
    Load a tab-separated word-to-category lexicon.

    Rows are either ``word<TAB>category`` or the NRC word-level layout
    ``word<TAB>category<TAB>association`` where only association 1 is kept.

    Args:
        path: Lexicon file

    Returns:
        Mapping of lowercase word to its categories, first-seen order, no repeats

    Raises:
        ValueError: If a row has the wrong number of columns or a bad flag
    """
    lexicon: Dict[str, List[str]] = {}

    for line_number, text in _read_rows(path):
        columns = [c.strip() for c in text.split("\t")]

        if len(columns) == 3:
            word, category, flag = columns
            if flag not in ("0", "1"):
                raise ValueError(f"{path}:{line_number}: association must be 0 or 1, got {flag!r}")
            if flag == "0":
                continue
        elif len(columns) == 2:
            word, category = columns
        else:
            raise ValueError(f"{path}:{line_number}: expected 2 or 3 tab-separated columns")

        if not word or not category:
            raise ValueError(f"{path}:{line_number}: empty word or category")

        categories = lexicon.setdefault(word.lower(), [])
        if category not in categories:
            categories.append(category)

    logger.info(f"Loaded sentiment lexicon from {path}: {len(lexicon)} words")
    return {word: tuple(categories) for word, categories in lexicon.items()}
