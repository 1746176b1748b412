"""Unit tests for the report SDK client."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import RadarConfig
from core.types import AnalysisSettings
from store.report_sdk import RadarClient
from tests.fixture_paths import fixture_path


def _client(tmp_path: Path) -> RadarClient:
    config = replace(RadarConfig.from_env(), output_root=tmp_path / "default-output")
    return RadarClient(config)


def test_analyze_applies_settings(tmp_path: Path) -> None:
    """Client analysis should honor custom selection limits."""
    client = _client(tmp_path)
    corpus = client.build_corpus(fixture_path("domains"))

    report = client.analyze(corpus, AnalysisSettings(ranking_limit=2, top_category_count=1))

    assert [scalars.domain for scalars in report.top_domains] == [
        "cdn.example",
        "adnetwork.example",
    ]
    assert [entry.category for entry in report.category_frequency.top] == [
        "Ad Motivated Tracking"
    ]


def test_write_report_defaults_to_config_output_root(tmp_path: Path) -> None:
    """Without an explicit directory, tables go to the configured root."""
    client = _client(tmp_path)

    manifest_path = client.write_report(fixture_path("domains"))

    assert manifest_path.parent == client.config.output_root
    assert (client.config.output_root / "category_leaders.csv").exists()
