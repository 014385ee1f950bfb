"""Unit tests for WordTokenizer."""
import sys
from pathlib import Path

# Add analysis to path
sys.path.insert(0, str(Path(__file__).parent.parent / "analysis"))

import pytest
from models.chapter import ChapterLine, Token
from services.tokenizer import WordTokenizer, tokenize_text


class TestTokenizeText:
    """Tests for single-line word segmentation."""
    
    def test_digit_tokens_removed(self):
        """Should drop purely numeric tokens."""
        assert tokenize_text("the old man walked 3 miles") == ["the", "old", "man", "walked", "miles"]
    
    def test_lowercase_and_punctuation(self):
        """Should lowercase and split on punctuation."""
        assert tokenize_text('"Stop!" she cried, well-nigh breathless.') == [
            "stop", "she", "cried", "well", "nigh", "breathless"
        ]
    
    def test_apostrophes_kept_inside_words(self):
        """Should keep contractions together and fold curly apostrophes."""
        assert tokenize_text("Don't go, it’s late") == ["don't", "go", "it's", "late"]
        assert tokenize_text("'Tis the dogs' bowl") == ["tis", "the", "dogs", "bowl"]
    
    def test_mixed_alphanumerics_kept(self):
        """Should keep tokens that are not entirely digits."""
        assert tokenize_text("the 3rd of May, 1851") == ["the", "3rd", "of", "may"]
        assert tokenize_text("1,000 men") == ["men"]
    
    def test_unicode_letters(self):
        """Should treat accented letters as word characters."""
        assert tokenize_text("Café naïve") == ["café", "naïve"]
    
    def test_decomposed_accents_stay_attached(self):
        """Should keep NFD accents on their letters and return composed words."""
        assert tokenize_text("café naïve") == ["café", "naïve"]

    def test_idempotent_with_combining_marks(self):
        """Lowercasing 'İ' leaves a combining dot; re-tokenizing must keep it."""
        words = tokenize_text("İstanbul")

        assert len(words) == 1
        assert tokenize_text(words[0]) == words

    def test_idempotent_on_single_words(self):
        """Re-tokenizing a single token should return that token."""
        for word in tokenize_text("The captain's log, don't forget: Ahab!"):
            assert tokenize_text(word) == [word]
    
    def test_empty_line(self):
        """Should produce no tokens for empty or punctuation-only lines."""
        assert tokenize_text("") == []
        assert tokenize_text("* * *") == []


class TestWordTokenizer:
    """Test suite for WordTokenizer."""
    
    @pytest.fixture
    def tokenizer(self):
        """Create a WordTokenizer instance."""
        return WordTokenizer()
    
    def test_tokens_keep_chapter_and_order(self, tokenizer):
        """Test tokens carry their chapter and keep line order."""
        tokens = tokenizer.tokenize([
            ChapterLine(chapter_number=1, text="Chapter I"),
            ChapterLine(chapter_number=1, text="the old man walked 3 miles"),
            ChapterLine(chapter_number=2, text=""),
            ChapterLine(chapter_number=2, text="Sea, sea!"),
        ])
        
        assert tokens == [
            Token(chapter_number=1, word="chapter"),
            Token(chapter_number=1, word="i"),
            Token(chapter_number=1, word="the"),
            Token(chapter_number=1, word="old"),
            Token(chapter_number=1, word="man"),
            Token(chapter_number=1, word="walked"),
            Token(chapter_number=1, word="miles"),
            Token(chapter_number=2, word="sea"),
            Token(chapter_number=2, word="sea"),
        ]
    
    def test_no_lines(self, tokenizer):
        """Test an empty input produces no tokens."""
        assert tokenizer.tokenize([]) == []
