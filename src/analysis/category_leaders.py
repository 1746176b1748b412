"""Top domains per category analysis.

This module picks the most prevalent domains inside each top category
and lays them out category-major, prevalence-ascending, with a
running order index for downstream chart layout.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import DEFAULT_PER_CATEGORY_LIMIT
from core.types import CategoryCount, CategoryLeaderRow, Corpus, FlatRow


def select_category_leaders(
    corpus: Corpus,
    top_categories: Sequence[CategoryCount],
    per_category: int = DEFAULT_PER_CATEGORY_LIMIT,
) -> tuple[CategoryLeaderRow, ...]:
    """Select the highest-prevalence domains within each top category.

    Args:
        corpus: Corpus to select from.
        top_categories: Categories to cover, in layout order.
        per_category: Maximum number of domains per category.

    Returns:
        Leader rows grouped by category in ``top_categories`` order and
        ascending by prevalence within each group. A domain listed under
        two categories appears once per category.
    """
    grouped_rows = _group_rows_by_category(corpus, top_categories)
    leaders: list[CategoryLeaderRow] = []
    for category_rows in grouped_rows.values():
        for row in _top_rows_ascending(category_rows, per_category):
            leaders.append(_leader_row(len(leaders) + 1, row))
    return tuple(leaders)


def _group_rows_by_category(
    corpus: Corpus,
    top_categories: Sequence[CategoryCount],
) -> dict[str, list[FlatRow]]:
    """Bucket corpus rows by category, keeping only the requested ones."""
    grouped_rows: dict[str, list[FlatRow]] = {
        entry.category: [] for entry in top_categories
    }
    for row in corpus.rows:
        if row.category in grouped_rows:
            grouped_rows[row.category].append(row)
    return grouped_rows


def _top_rows_ascending(rows: list[FlatRow], per_category: int) -> list[FlatRow]:
    """Keep the highest-prevalence rows and return them ascending.

    Earlier rows win prevalence ties on selection and stay first among
    equals after the ascending re-sort.
    """
    indexed_rows = list(enumerate(rows))
    highest = sorted(indexed_rows, key=lambda item: item[1].prevalence, reverse=True)
    ascending = sorted(highest[:per_category], key=lambda item: (item[1].prevalence, item[0]))
    return [row for _, row in ascending]


def _leader_row(order: int, row: FlatRow) -> CategoryLeaderRow:
    return CategoryLeaderRow(
        order=order,
        category=row.category,
        domain=row.domain,
        owner=row.owner,
        prevalence=row.prevalence,
        fingerprinting=row.fingerprinting,
        cookies=row.cookies,
    )
