"""Unit tests for the stop-word and sentiment lexicon loaders."""
import sys
from pathlib import Path

# Add analysis to path
sys.path.insert(0, str(Path(__file__).parent.parent / "analysis"))

import pytest
import services
from config import DATA_DIR, LEXICON_PATH, STOP_WORDS_PATH
from services.lexicon import load_sentiment_lexicon, load_stop_words


class TestBundledTables:
    """Tests for the default lookup table locations."""

    def test_default_paths_exist(self):
        """The configured default tables should exist on disk."""
        assert Path(STOP_WORDS_PATH).is_file()
        assert Path(LEXICON_PATH).is_file()

    def test_tables_live_inside_services_package(self):
        """Bundled tables should sit in the services package so installs carry them."""
        services_dir = Path(services.__file__).resolve().parent

        assert DATA_DIR.resolve().parent == services_dir
        assert (DATA_DIR / "stop_words.txt").is_file()
        assert (DATA_DIR / "sentiment_lexicon.tsv").is_file()


class TestStopWords:
    """Tests for load_stop_words."""
    
    def test_load(self, tmp_path):
        """Should skip comments and blanks and lowercase entries."""
        path = tmp_path / "stop.txt"
        path.write_text("# comment\nThe\n\n  and \nof\n", encoding="utf-8")
        
        assert load_stop_words(path) == frozenset({"the", "and", "of"})
    
    def test_missing_file(self, tmp_path):
        """Should raise FileNotFoundError for a missing list."""
        with pytest.raises(FileNotFoundError):
            load_stop_words(tmp_path / "missing.txt")
    
    def test_bundled_list(self):
        """The bundled list should contain common function words."""
        stop_words = load_stop_words(STOP_WORDS_PATH)
        
        assert {"the", "and", "of", "i", "don't"} <= stop_words
        assert "whale" not in stop_words


class TestSentimentLexicon:
    """Tests for load_sentiment_lexicon."""
    
    def test_nrc_layout(self, lexicon_file):
        """Should keep only association-1 rows, in first-seen order."""
        lexicon = load_sentiment_lexicon(lexicon_file)
        
        assert lexicon["hope"] == ("joy", "positive")
        assert lexicon["storm"] == ("anger",)
        assert "fear" not in lexicon["hope"]
    
    def test_two_column_layout_and_duplicates(self, tmp_path):
        """Should accept word/category rows and drop repeated categories."""
        path = tmp_path / "lex.tsv"
        path.write_text("Joy\tjoy\njoy\tjoy\njoy\tpositive\n", encoding="utf-8")
        
        assert load_sentiment_lexicon(path) == {"joy": ("joy", "positive")}
    
    def test_zero_only_word_absent(self, tmp_path):
        """A word with no associations should not appear."""
        path = tmp_path / "lex.tsv"
        path.write_text("table\tjoy\t0\ntable\tanger\t0\n", encoding="utf-8")
        
        assert load_sentiment_lexicon(path) == {}
    
    def test_malformed_rows(self, tmp_path):
        """Should report the file and line of a bad row."""
        path = tmp_path / "lex.tsv"
        path.write_text("# header\ngood\tjoy\t1\nbad row\n", encoding="utf-8")
        
        with pytest.raises(ValueError, match=r"lex\.tsv:3"):
            load_sentiment_lexicon(path)
        
        path.write_text("word\tjoy\tyes\n", encoding="utf-8")
        with pytest.raises(ValueError, match="association"):
            load_sentiment_lexicon(path)
    
    def test_bundled_lexicon(self):
        """The bundled sample lexicon should load with multi-category words."""
        lexicon = load_sentiment_lexicon(LEXICON_PATH)
        
        assert set(lexicon["death"]) >= {"fear", "negative", "sadness"}
        assert "joy" not in lexicon["abandon"]
