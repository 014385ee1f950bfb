"""Chart, word cloud and JSON summary rendering for a finished report."""
import json
import logging
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

import matplotlib
matplotlib.use("Agg")  # headless; must precede pyplot import
import matplotlib.pyplot as plt
from wordcloud import WordCloud

from models.aggregate import ChapterWordCount, ReportData, SentimentCount, WordFrequency

logger = logging.getLogger(__name__)


class ReportRenderer:
    """Writes report artifacts into an output directory."""

    CHAPTER_CHART = "chapter_word_counts.png"
    WORD_CLOUD = "word_cloud.png"
    SENTIMENT_CHART = "sentiment_counts.png"
    SUMMARY = "report_summary.json"

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _bar_chart(self, labels: List[str], values: List[int], title: str, xlabel: str, filename: str) -> Path:
        path = self.output_dir / filename
        fig, ax = plt.subplots(figsize=(10, 5))
        try:
            ax.bar(labels, values, color="steelblue")
            ax.set_title(title)
            ax.set_xlabel(xlabel)
            ax.set_ylabel("Count")
            ax.tick_params(axis="x", labelrotation=45)
            fig.tight_layout()
            fig.savefig(path)
        finally:
            plt.close(fig)
        logger.info(f"Wrote {path}")
        return path

    def render_chapter_counts(self, counts: List[ChapterWordCount]) -> Path:
        """Bar chart of word count by chapter."""
        return self._bar_chart(
            labels=[str(c.chapter_number) for c in counts],
            values=[c.count for c in counts],
            title="Words per chapter",
            xlabel="Chapter",
            filename=self.CHAPTER_CHART
        )

    def render_word_cloud(self, frequencies: List[WordFrequency]) -> Optional[Path]:
        """Word cloud weighted by frequency. Returns None if there are no words."""
        if not frequencies:
            logger.warning("No word frequencies to render; skipping word cloud")
            return None

        path = self.output_dir / self.WORD_CLOUD
        cloud = WordCloud(width=1200, height=800, background_color="white")
        cloud.generate_from_frequencies({f.word: f.count for f in frequencies})
        cloud.to_file(str(path))
        logger.info(f"Wrote {path}")
        return path

    def render_sentiment_counts(self, counts: List[SentimentCount]) -> Path:
        """Bar chart of matched word count by sentiment category."""
        return self._bar_chart(
            labels=[c.category for c in counts],
            values=[c.count for c in counts],
            title="Sentiment categories",
            xlabel="Category",
            filename=self.SENTIMENT_CHART
        )

    def write_summary(self, report: ReportData) -> Path:
        path = self.output_dir / self.SUMMARY
        path.write_text(json.dumps(report.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(f"Wrote {path}")
        return path

    def render(self, report: ReportData) -> Dict[str, Path]:
        """
        Render every artifact for a report.

        Artifacts are written to a staging directory first and moved into
        ``output_dir`` only once all of them rendered, so a failure leaves
        no partial report behind.

        Args:
            report: Aggregates produced by the pipeline

        Returns:
            Mapping of artifact name to written path (word cloud omitted when empty)
        """
        with tempfile.TemporaryDirectory(dir=self.output_dir, prefix=".staging-") as staging_dir:
            staging = ReportRenderer(staging_dir)
            staged = {}
            word_cloud = staging.render_word_cloud(report.word_frequencies)
            if word_cloud is not None:
                staged["word_cloud"] = word_cloud
            staged["chapter_counts"] = staging.render_chapter_counts(report.chapter_counts)
            staged["sentiment_counts"] = staging.render_sentiment_counts(report.sentiment_counts)
            staged["summary"] = staging.write_summary(report)

            artifacts = {}
            for name, path in staged.items():
                artifacts[name] = path.replace(self.output_dir / path.name)

        logger.info(f"Report written to {self.output_dir} ({len(artifacts)} artifacts)")
        return artifacts
