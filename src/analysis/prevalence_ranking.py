"""Prevalence ranking analysis.

This module ranks domains by prevalence after collapsing each domain's
category rows back to a single scalar row.
"""

from __future__ import annotations

from core.constants import DEFAULT_RANKING_LIMIT
from core.types import Corpus, DomainScalars


def rank_by_prevalence(
    corpus: Corpus,
    limit: int = DEFAULT_RANKING_LIMIT,
) -> tuple[DomainScalars, ...]:
    """Return the most prevalent domains.

    Args:
        corpus: Corpus to rank.
        limit: Maximum number of domains to return.

    Returns:
        Distinct scalar rows, descending by prevalence. Equal prevalence
        keeps corpus order.
    """
    unique_rows = _distinct_scalars(corpus)
    ranked = sorted(unique_rows, key=lambda scalars: scalars.prevalence, reverse=True)
    return tuple(ranked[:limit])


def _distinct_scalars(corpus: Corpus) -> list[DomainScalars]:
    """Project rows to scalars and drop exact duplicates, first one wins."""
    # dict keys keep insertion order
    return list(dict.fromkeys(row.scalars() for row in corpus.rows))
