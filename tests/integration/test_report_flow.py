"""Integration tests for the end-to-end report workflow."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pyarrow.csv as pa_csv

from core.config import RadarConfig
from core.types import CategoryCount
from store.report_sdk import RadarClient
from tests.fixture_paths import fixture_path


def test_fixture_directory_report_end_to_end(tmp_path: Path) -> None:
    """Fixture documents should produce the expected three analyses."""
    client = RadarClient(replace(RadarConfig.from_env(), output_root=tmp_path))
    corpus = client.build_corpus(fixture_path("domains"))

    report = client.analyze(corpus)

    assert len(corpus) == 8 and corpus.domain_count == 5
    assert [scalars.domain for scalars in report.top_domains] == [
        "cdn.example",
        "adnetwork.example",
        "analytics.example",
        "social.example",
        "session.example",
    ]
    assert report.category_frequency.counts == (
        CategoryCount("Advertising", 1),
        CategoryCount("Analytics", 1),
        CategoryCount("Audience Measurement", 1),
        CategoryCount("Social - Share", 1),
        CategoryCount("Ad Motivated Tracking", 2),
    )
    assert report.category_frequency.top[0] == CategoryCount("Ad Motivated Tracking", 2)
    assert [(leader.order, leader.key) for leader in report.category_leaders] == [
        (1, "social.example|Ad Motivated Tracking"),
        (2, "adnetwork.example|Ad Motivated Tracking"),
        (3, "adnetwork.example|Advertising"),
        (4, "analytics.example|Analytics"),
        (5, "analytics.example|Audience Measurement"),
        (6, "social.example|Social - Share"),
    ]


def test_fixture_directory_report_tables_on_disk(tmp_path: Path) -> None:
    """Written leader table should match the in-memory analysis."""
    client = RadarClient(replace(RadarConfig.from_env(), output_root=tmp_path))

    client.write_report(fixture_path("domains"), tmp_path / "out")

    leaders = pa_csv.read_csv(
        str(tmp_path / "out" / "category_leaders.csv"),
        convert_options=pa_csv.ConvertOptions(strings_can_be_null=True),
    )
    assert leaders.column("order").to_pylist() == [1, 2, 3, 4, 5, 6]
    assert leaders.column("owner").to_pylist()[0] is None
