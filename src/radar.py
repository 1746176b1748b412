"""Public SDK surface for Tracker Radar reports.

This module provides a stable import path for report users.
It re-exports the primary client, typed models, and analyses.
"""

from __future__ import annotations

from analysis.category_frequency import count_categories
from analysis.category_leaders import select_category_leaders
from analysis.prevalence_ranking import rank_by_prevalence
from core.analysis_settings import load_analysis_settings
from core.config import RadarConfig
from core.types import (
    AnalysisReport,
    AnalysisSettings,
    CategoryCount,
    CategoryFrequency,
    CategoryLeaderRow,
    Corpus,
    DomainRecord,
    DomainScalars,
    FlatRow,
)
from ingest.pipeline import aggregate, build_corpus
from ingest.record_loader import load_record, parse_record
from store.report_sdk import RadarClient
from transforms.category_expansion import expand
from transforms.record_normalizer import normalize

__all__ = [
    "AnalysisReport",
    "AnalysisSettings",
    "CategoryCount",
    "CategoryFrequency",
    "CategoryLeaderRow",
    "Corpus",
    "DomainRecord",
    "DomainScalars",
    "FlatRow",
    "RadarClient",
    "RadarConfig",
    "aggregate",
    "build_corpus",
    "count_categories",
    "expand",
    "load_analysis_settings",
    "load_record",
    "normalize",
    "parse_record",
    "rank_by_prevalence",
    "select_category_leaders",
]
