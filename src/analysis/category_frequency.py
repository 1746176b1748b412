"""Category frequency analysis.

This module counts how many corpus rows carry each observed category.
Rows under the uncategorized sentinel are excluded, and categories that
never occur are never reported.
"""

from __future__ import annotations

from collections import Counter

from core.constants import DEFAULT_TOP_CATEGORY_COUNT, UNCATEGORIZED_CATEGORY
from core.types import CategoryCount, CategoryFrequency, Corpus


def count_categories(
    corpus: Corpus,
    top_count: int = DEFAULT_TOP_CATEGORY_COUNT,
) -> CategoryFrequency:
    """Count category occurrences across the corpus.

    Args:
        corpus: Corpus to count.
        top_count: Number of categories in the top subset.

    Returns:
        Full counts ascending by count and the top subset descending by
        count. Ties keep first-seen category order in both.
    """
    observed = _observed_counts(corpus)
    ascending = sorted(observed, key=lambda entry: entry.count)
    descending = sorted(observed, key=lambda entry: entry.count, reverse=True)
    return CategoryFrequency(counts=tuple(ascending), top=tuple(descending[:top_count]))


def _observed_counts(corpus: Corpus) -> list[CategoryCount]:
    """Count non-sentinel categories in first-seen order."""
    counter = Counter(
        row.category for row in corpus.rows if row.category != UNCATEGORIZED_CATEGORY
    )
    return [CategoryCount(category=category, count=count) for category, count in counter.items()]
