"""Configuration management for the novel chapter & sentiment report."""
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Bundled lookup tables ship as package data of services/
DATA_DIR = Path(__file__).parent / "services" / "data"

# Source Document
SOURCE_PATH = os.getenv("SOURCE_PATH", "novel.pdf")

# In-scope page range (inclusive, 1-indexed). LAST_PAGE unset means "through the end".
FIRST_PAGE = int(os.getenv("FIRST_PAGE", "1"))
LAST_PAGE = int(os.getenv("LAST_PAGE")) if os.getenv("LAST_PAGE") else None

# Aggregation Configuration
TOP_N_WORDS = int(os.getenv("TOP_N_WORDS", "200"))

# Lookup tables
STOP_WORDS_PATH = os.getenv("STOP_WORDS_PATH", str(DATA_DIR / "stop_words.txt"))
LEXICON_PATH = os.getenv("LEXICON_PATH", str(DATA_DIR / "sentiment_lexicon.tsv"))

# Report Output
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "report_output")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
