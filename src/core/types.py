"""Shared typed models.

This module defines immutable data models used by ingest, transform,
analysis, and export layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import (
    DEFAULT_PER_CATEGORY_LIMIT,
    DEFAULT_RANKING_LIMIT,
    DEFAULT_TOP_CATEGORY_COUNT,
    LEADER_KEY_SEPARATOR,
)


@dataclass(frozen=True)
class PerformanceMetrics:
    """Optional performance measurements for a third-party domain.

    Attributes:
        time: Average load time, or None when not reported.
        size: Average transfer size, or None when not reported.
        cpu: Average CPU time, or None when not reported.
        cache: Average cache lifetime, or None when not reported.
    """

    time: float | None = None
    size: float | None = None
    cpu: float | None = None
    cache: float | None = None


@dataclass(frozen=True)
class DomainRecord:
    """Parsed source document for one third-party domain.

    Attributes:
        domain: Domain name.
        owner_name: Owner display name, None when absent.
        prevalence: Fraction of crawled sites where the domain appeared.
        sites: Number of crawled sites where the domain appeared.
        fingerprinting: Fingerprinting likelihood level, 0 to 3.
        cookies: Fraction of sites where the domain set cookies.
        performance: Optional performance measurements.
        categories: Category tags in source order.
    """

    domain: str
    owner_name: str | None
    prevalence: float
    sites: int
    fingerprinting: int
    cookies: float
    performance: PerformanceMetrics
    categories: tuple[str, ...] = ()


@dataclass(frozen=True)
class DomainScalars:
    """Domain-level scalar fields shared by every row of a domain."""

    domain: str
    owner: str | None
    prevalence: float
    sites: int
    fingerprinting: int
    cookies: float
    performance_time: float | None
    performance_size: float | None
    performance_cpu: float | None
    performance_cache: float | None


@dataclass(frozen=True)
class FlatRow:
    """One (domain, category) pair plus the domain's scalar fields."""

    domain: str
    owner: str | None
    prevalence: float
    sites: int
    fingerprinting: int
    cookies: float
    performance_time: float | None
    performance_size: float | None
    performance_cpu: float | None
    performance_cache: float | None
    category: str

    def scalars(self) -> DomainScalars:
        """Project this row to its domain-level fields, dropping category."""
        return DomainScalars(
            domain=self.domain,
            owner=self.owner,
            prevalence=self.prevalence,
            sites=self.sites,
            fingerprinting=self.fingerprinting,
            cookies=self.cookies,
            performance_time=self.performance_time,
            performance_size=self.performance_size,
            performance_cpu=self.performance_cpu,
            performance_cache=self.performance_cache,
        )


@dataclass(frozen=True)
class Corpus:
    """Ordered, read-only collection of flat rows across all domains."""

    rows: tuple[FlatRow, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def domain_count(self) -> int:
        """Count distinct domain names in the corpus."""
        return len({row.domain for row in self.rows})


@dataclass(frozen=True)
class CategoryCount:
    """Occurrence count of one observed category."""

    category: str
    count: int


@dataclass(frozen=True)
class CategoryFrequency:
    """Category frequency analysis result.

    Attributes:
        counts: Every observed category, ascending by count.
        top: Highest-count categories, descending by count.
    """

    counts: tuple[CategoryCount, ...]
    top: tuple[CategoryCount, ...]


@dataclass(frozen=True)
class CategoryLeaderRow:
    """One high-prevalence domain selected within a top category.

    Attributes:
        order: Strictly increasing layout index, category-major.
        category: Category the domain was selected under.
        domain: Domain name.
        owner: Owner display name or None.
        prevalence: Domain prevalence.
        fingerprinting: Fingerprinting level.
        cookies: Cookie percentage.
    """

    order: int
    category: str
    domain: str
    owner: str | None
    prevalence: float
    fingerprinting: int
    cookies: float

    @property
    def key(self) -> str:
        """Return the unique ``domain|category`` key for this row."""
        return f"{self.domain}{LEADER_KEY_SEPARATOR}{self.category}"


@dataclass(frozen=True)
class AnalysisSettings:
    """Selection limits for the three corpus analyses.

    Attributes:
        ranking_limit: Number of domains in the prevalence ranking.
        top_category_count: Number of categories in the top subset.
        per_category_limit: Number of domains kept per top category.
    """

    ranking_limit: int = DEFAULT_RANKING_LIMIT
    top_category_count: int = DEFAULT_TOP_CATEGORY_COUNT
    per_category_limit: int = DEFAULT_PER_CATEGORY_LIMIT


@dataclass(frozen=True)
class AnalysisReport:
    """Combined output of all three analyses."""

    top_domains: tuple[DomainScalars, ...]
    category_frequency: CategoryFrequency
    category_leaders: tuple[CategoryLeaderRow, ...]
