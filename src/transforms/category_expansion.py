"""Category fan-out transform.

This module expands one domain's scalar fields into one flat row per
category tag. A domain without tags yields a single row under the
uncategorized sentinel, so every domain produces max(1, N) rows.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

from core.constants import UNCATEGORIZED_CATEGORY
from core.types import DomainScalars, FlatRow


def expand(scalars: DomainScalars, categories: Sequence[str]) -> tuple[FlatRow, ...]:
    """Expand domain scalars into flat rows keyed on category.

    Args:
        scalars: Domain-level scalar fields.
        categories: Category tags in source order, possibly empty.

    Returns:
        One row per tag in source order, or a single sentinel row.
    """
    fields = asdict(scalars)
    if not categories:
        return (FlatRow(**fields, category=UNCATEGORIZED_CATEGORY),)
    return tuple(FlatRow(**fields, category=category) for category in categories)
