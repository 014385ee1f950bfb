"""Shared fixtures for report pipeline tests."""
import sys
from pathlib import Path

# Add analysis to path
sys.path.insert(0, str(Path(__file__).parent.parent / "analysis"))

import fitz  # PyMuPDF
import pytest


@pytest.fixture
def make_pdf(tmp_path):
    """Build a PDF with one page per string and return its path."""
    def _make_pdf(page_texts, name="novel.pdf"):
        path = tmp_path / name
        doc = fitz.open()
        for text in page_texts:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text, fontsize=11)
        doc.save(str(path))
        doc.close()
        return path
    return _make_pdf


@pytest.fixture
def stop_words_file(tmp_path):
    path = tmp_path / "stop_words.txt"
    path.write_text("# test stop words\nthe\na\nand\nwas\ni\n", encoding="utf-8")
    return path


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "lexicon.tsv"
    path.write_text(
        "hope\tjoy\t1\n"
        "hope\tpositive\t1\n"
        "hope\tfear\t0\n"
        "storm\tanger\t1\n"
        "lost\tsadness\t1\n"
        "happy\tjoy\t1\n",
        encoding="utf-8"
    )
    return path
