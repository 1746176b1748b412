"""Python SDK for report workflows.

This module exposes high-level APIs for building a corpus, running the
analyses, and writing report tables.
"""

from __future__ import annotations

from pathlib import Path

from analysis.report import run_analyses
from core.config import RadarConfig
from core.logging_config import get_logger
from core.types import AnalysisReport, AnalysisSettings, Corpus
from ingest.pipeline import build_corpus
from store.table_export import write_report_tables

_LOGGER = get_logger(__name__)


class RadarClient:
    """Primary SDK entry point for report workflows."""

    def __init__(self, config: RadarConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or RadarConfig.from_env()

    @property
    def config(self) -> RadarConfig:
        return self._config

    def build_corpus(self, source: str | Path) -> Corpus:
        """Ingest domain documents into a corpus.

        Args:
            source: Domain document file or directory.

        Returns:
            Immutable corpus.

        Raises:
            RadarIngestError: If any document fails to load.
        """
        return build_corpus(source, self._config)

    def analyze(
        self,
        corpus: Corpus,
        settings: AnalysisSettings | None = None,
    ) -> AnalysisReport:
        """Run all analyses over a corpus.

        Args:
            corpus: Corpus to analyze.
            settings: Optional selection limits, defaults when omitted.

        Returns:
            Bundled analysis results.
        """
        return run_analyses(corpus, settings or AnalysisSettings())

    def write_report(
        self,
        source: str | Path,
        output_dir: str | Path | None = None,
        settings: AnalysisSettings | None = None,
    ) -> Path:
        """Ingest, analyze, and write report tables in one call.

        Args:
            source: Domain document file or directory.
            output_dir: Destination directory, config output root if omitted.
            settings: Optional selection limits.

        Returns:
            Path to the written report manifest.
        """
        report = self.analyze(self.build_corpus(source), settings)
        destination = Path(output_dir) if output_dir else self._config.output_root
        manifest_path = write_report_tables(report, destination)
        _LOGGER.info("report_written", source=str(source), manifest_path=str(manifest_path))
        return manifest_path
