"""
Report generation script for the novel chapter & sentiment report.

This script:
1. Extracts page text from the configured PDF
2. Normalizes lines inside the in-scope page range
3. Tags lines with chapter numbers
4. Tokenizes lines into words
5. Aggregates chapter counts, word frequencies and sentiment counts
6. Renders charts, a word cloud and a JSON summary to OUTPUT_DIR

Usage:
    python generate_report.py [path/to/novel.pdf]
"""
import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

# Add analysis/ to path
sys.path.insert(0, str(Path(__file__).parent))

from config import LOG_FORMAT, LOG_LEVEL, OUTPUT_DIR, SOURCE_PATH
from logger import setup_logging
from services.document_loader import ExtractionError
from services.line_normalizer import EmptyRangeError
from services.report_pipeline import ReportPipeline
from services.report_renderer import ReportRenderer

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the chapter & sentiment report for a novel PDF")
    parser.add_argument(
        "source_path",
        nargs="?",
        default=SOURCE_PATH,
        help=f"PDF to analyse (default: {SOURCE_PATH})"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main report process."""
    args = parse_args(argv)
    if LOG_FORMAT == "json":
        setup_logging(LOG_LEVEL)

    try:
        logger.info("=" * 60)
        logger.info(f"Generating report for {args.source_path}")
        logger.info("=" * 60)

        pipeline = ReportPipeline(source_path=args.source_path)
        report = pipeline.run()

        renderer = ReportRenderer(OUTPUT_DIR)
        artifacts = renderer.render(report)

        logger.info("=" * 60)
        logger.info("REPORT COMPLETE")
        logger.info(f"Chapters: {len(report.chapter_counts)}")
        logger.info(f"Tokens: {report.total_tokens}")
        logger.info(f"Skipped chapter headings: {report.skipped_headings}")
        for name, path in artifacts.items():
            logger.info(f"  - {name}: {path}")
        logger.info("=" * 60)

    except ExtractionError as e:
        logger.error(f"Extraction failed for {e.source_path}: {e.reason}")
        sys.exit(1)
    except EmptyRangeError as e:
        logger.error(f"Empty page range [{e.first_page}, {e.last_page}] in {args.source_path}")
        sys.exit(1)
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except ValueError as e:
        # Malformed lookup table rows or invalid page/top-N settings
        logger.error(f"Invalid configuration or lookup table: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Report generation interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
