"""Combined corpus analysis.

This module runs the three fixed analyses with one settings object and
bundles their outputs for export and display.
"""

from __future__ import annotations

from analysis.category_frequency import count_categories
from analysis.category_leaders import select_category_leaders
from analysis.prevalence_ranking import rank_by_prevalence
from core.logging_config import get_logger
from core.types import AnalysisReport, AnalysisSettings, Corpus

_LOGGER = get_logger(__name__)


def run_analyses(corpus: Corpus, settings: AnalysisSettings) -> AnalysisReport:
    """Run ranking, category frequency, and category leader analyses.

    Args:
        corpus: Corpus to analyze.
        settings: Selection limits.

    Returns:
        Bundled analysis results.
    """
    top_domains = rank_by_prevalence(corpus, settings.ranking_limit)
    category_frequency = count_categories(corpus, settings.top_category_count)
    category_leaders = select_category_leaders(
        corpus,
        category_frequency.top,
        settings.per_category_limit,
    )
    _LOGGER.info(
        "analysis_completed",
        row_count=len(corpus),
        top_domain_count=len(top_domains),
        category_count=len(category_frequency.counts),
        leader_count=len(category_leaders),
    )
    return AnalysisReport(
        top_domains=top_domains,
        category_frequency=category_frequency,
        category_leaders=category_leaders,
    )
