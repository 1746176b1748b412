"""Unit tests for corpus ingest orchestration."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import replace
import json
from pathlib import Path

import pytest

from core.config import RadarConfig
from core.errors import ParseError, SchemaViolation
from core.types import Corpus
from ingest.pipeline import aggregate, build_corpus, load_domain_rows
from tests.corpus_builders import make_row
from tests.fixture_paths import fixture_path


def _config(load_workers: int = 1) -> RadarConfig:
    return replace(RadarConfig.from_env(), load_workers=load_workers)


def test_build_corpus_keeps_enumeration_and_category_order() -> None:
    """Corpus rows follow file order, then category order in a file."""
    corpus = build_corpus(fixture_path("domains"), _config())

    assert [(row.domain, row.category) for row in corpus.rows] == [
        ("adnetwork.example", "Ad Motivated Tracking"),
        ("adnetwork.example", "Advertising"),
        ("analytics.example", "Analytics"),
        ("analytics.example", "Audience Measurement"),
        ("cdn.example", "Uncategorized"),
        ("social.example", "Social - Share"),
        ("social.example", "Ad Motivated Tracking"),
        ("session.example", "Uncategorized"),
    ]


def test_build_corpus_rows_per_domain_match_category_count() -> None:
    """Each domain yields max(1, number of categories) rows."""
    corpus = build_corpus(fixture_path("domains"), _config())
    rows_by_domain: dict[str, int] = defaultdict(int)
    for row in corpus.rows:
        rows_by_domain[row.domain] += 1

    assert rows_by_domain == {
        "adnetwork.example": 2,
        "analytics.example": 2,
        "cdn.example": 1,
        "social.example": 2,
        "session.example": 1,
    }


def test_build_corpus_groups_recover_identical_scalars() -> None:
    """All rows of one domain share the same scalar fields."""
    corpus = build_corpus(fixture_path("domains"), _config())
    scalars_by_domain: dict[str, set[object]] = defaultdict(set)
    for row in corpus.rows:
        scalars_by_domain[row.domain].add(row.scalars())

    assert all(len(scalars) == 1 for scalars in scalars_by_domain.values())


def test_build_corpus_with_threads_matches_sequential_order() -> None:
    """Parallel loading should produce the same corpus as sequential loading."""
    sequential = build_corpus(fixture_path("domains"), _config())
    parallel = build_corpus(fixture_path("domains"), _config(load_workers=4))

    assert parallel == sequential


def test_build_corpus_fails_fast_on_bad_document(tmp_path: Path) -> None:
    """One malformed document aborts the whole ingest."""
    valid = json.loads(fixture_path("domains/c_cdn.example.json").read_text(encoding="utf-8"))
    (tmp_path / "a.json").write_text(json.dumps(valid), encoding="utf-8")
    (tmp_path / "b.json").write_text("{oops", encoding="utf-8")

    with pytest.raises(ParseError) as error_info:
        build_corpus(tmp_path, _config())

    assert error_info.value.source_id == str(tmp_path / "b.json")


def test_build_corpus_fails_fast_with_threads() -> None:
    """Parallel loading still surfaces the first schema violation."""
    with pytest.raises(SchemaViolation):
        build_corpus(fixture_path("invalid/missing_prevalence.json"), _config(load_workers=2))


def test_load_domain_rows_emits_sentinel_for_uncategorized_domain() -> None:
    """A domain without tags gets one sentinel row."""
    rows = load_domain_rows(fixture_path("domains/e_session.example.json"))

    assert [row.category for row in rows] == ["Uncategorized"]


def test_aggregate_concatenates_without_dedup_or_sorting() -> None:
    """Aggregation keeps every row in group order."""
    first = (make_row("b.example", "Ads", 0.1), make_row("b.example", "Ads", 0.1))
    second = (make_row("a.example", "Analytics", 0.9),)

    corpus = aggregate([first, second])

    assert corpus.rows == first + second


def test_aggregate_of_nothing_is_empty_corpus() -> None:
    """No domains means an empty corpus."""
    assert aggregate([]) == Corpus()
