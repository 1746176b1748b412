"""Domain record normalization transform.

This module flattens a parsed domain record into its domain-level
scalar fields. Absent optional values stay None so a reported zero
is never confused with a missing measurement.
"""

from __future__ import annotations

from core.types import DomainRecord, DomainScalars


def normalize(record: DomainRecord) -> DomainScalars:
    """Map a domain record to its scalar fields.

    Args:
        record: Parsed domain record.

    Returns:
        Flat scalar tuple with None for absent optional fields.
    """
    performance = record.performance
    return DomainScalars(
        domain=record.domain,
        owner=record.owner_name,
        prevalence=record.prevalence,
        sites=record.sites,
        fingerprinting=record.fingerprinting,
        cookies=record.cookies,
        performance_time=performance.time,
        performance_size=performance.size,
        performance_cpu=performance.cpu,
        performance_cache=performance.cache,
    )
