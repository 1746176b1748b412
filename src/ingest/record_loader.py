"""Per-domain document loader.

This module parses one Tracker Radar style domain document into a typed
``DomainRecord``. Mandatory fields are type and range checked; optional
fields may be absent or null and are kept as None.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from core.constants import MAX_FINGERPRINTING_LEVEL, MIN_FINGERPRINTING_LEVEL
from core.errors import ParseError, SchemaViolation
from core.types import DomainRecord, PerformanceMetrics
from ingest.input_reader import read_source_text

_PERFORMANCE_FIELDS = ("time", "size", "cpu", "cache")


def load_record(source_path: Path) -> DomainRecord:
    """Read and parse one domain document from disk.

    Args:
        source_path: Path to the JSON document.

    Returns:
        Parsed domain record.

    Raises:
        FileReadError: If the file cannot be read.
        ParseError: If the file is not well-formed JSON.
        SchemaViolation: If a field is missing or mistyped.
    """
    text = read_source_text(source_path)
    return parse_record(text, str(source_path))


def parse_record(text: str, source_id: str) -> DomainRecord:
    """Parse domain document text into a record.

    Args:
        text: Raw JSON text.
        source_id: Source identity used in error messages.

    Returns:
        Parsed domain record.

    Raises:
        ParseError: If the text is not a JSON object.
        SchemaViolation: If a field is missing or mistyped.
    """
    payload = _parse_json_object(text, source_id)
    return DomainRecord(
        domain=_required_string(payload, "domain", source_id),
        owner_name=_owner_name(payload, source_id),
        prevalence=_required_fraction(payload, "prevalence", source_id),
        sites=_required_sites(payload, source_id),
        fingerprinting=_required_fingerprinting(payload, source_id),
        cookies=_required_fraction(payload, "cookies", source_id),
        performance=_performance(payload, source_id),
        categories=_categories(payload, source_id),
    )


def _parse_json_object(text: str, source_id: str) -> Mapping[str, Any]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise ParseError(
            f"Failed to parse domain document {source_id}: {error.msg} "
            f"at line {error.lineno} column {error.colno}. Fix the JSON syntax and retry.",
            source_id=source_id,
        ) from error
    if not isinstance(payload, dict):
        raise ParseError(
            f"Invalid domain document {source_id}: expected a JSON object, "
            f"got {type(payload).__name__}.",
            source_id=source_id,
        )
    return payload


def _required_string(payload: Mapping[str, Any], field_name: str, source_id: str) -> str:
    value = payload.get(field_name)
    if not isinstance(value, str) or not value:
        raise _schema_error(source_id, field_name, "a non-empty string", value, payload)
    return value


def _required_fraction(payload: Mapping[str, Any], field_name: str, source_id: str) -> float:
    value = payload.get(field_name)
    if not _is_number(value) or not 0.0 <= value <= 1.0:
        raise _schema_error(source_id, field_name, "a number in [0, 1]", value, payload)
    return float(value)


def _required_sites(payload: Mapping[str, Any], source_id: str) -> int:
    value = payload.get("sites")
    if not _is_integer(value) or value < 0:
        raise _schema_error(source_id, "sites", "a non-negative integer", value, payload)
    return int(value)


def _required_fingerprinting(payload: Mapping[str, Any], source_id: str) -> int:
    value = payload.get("fingerprinting")
    if not _is_integer(value) or not (
        MIN_FINGERPRINTING_LEVEL <= value <= MAX_FINGERPRINTING_LEVEL
    ):
        expected = (
            f"an integer from {MIN_FINGERPRINTING_LEVEL} to {MAX_FINGERPRINTING_LEVEL}"
        )
        raise _schema_error(source_id, "fingerprinting", expected, value, payload)
    return int(value)


def _owner_name(payload: Mapping[str, Any], source_id: str) -> str | None:
    owner = payload.get("owner")
    if owner is None:
        return None
    if not isinstance(owner, dict):
        raise _schema_error(source_id, "owner", "an object", owner, payload)
    display_name = owner.get("displayName")
    if display_name is None:
        return None
    if not isinstance(display_name, str):
        raise _schema_error(source_id, "owner.displayName", "a string", display_name, payload)
    return display_name


def _performance(payload: Mapping[str, Any], source_id: str) -> PerformanceMetrics:
    performance = payload.get("performance")
    if performance is None:
        return PerformanceMetrics()
    if not isinstance(performance, dict):
        raise _schema_error(source_id, "performance", "an object", performance, payload)
    metrics: dict[str, float | None] = {}
    for metric_name in _PERFORMANCE_FIELDS:
        value = performance.get(metric_name)
        if value is not None and not _is_number(value):
            raise _schema_error(
                source_id, f"performance.{metric_name}", "a number", value, payload
            )
        metrics[metric_name] = None if value is None else float(value)
    return PerformanceMetrics(**metrics)


def _categories(payload: Mapping[str, Any], source_id: str) -> tuple[str, ...]:
    categories = payload.get("categories")
    if categories is None:
        return ()
    if not isinstance(categories, list) or not all(
        isinstance(category, str) for category in categories
    ):
        raise _schema_error(source_id, "categories", "a list of strings", categories, payload)
    return tuple(categories)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _schema_error(
    source_id: str,
    field_name: str,
    expected: str,
    value: object,
    payload: Mapping[str, Any],
) -> SchemaViolation:
    """Build a schema error naming the field and what was found."""
    top_level_name = field_name.split(".", 1)[0]
    if top_level_name not in payload:
        found = "missing"
    else:
        found = f"got {value!r}"
    return SchemaViolation(
        f"Invalid domain document {source_id}: field '{field_name}' must be {expected}, "
        f"{found}. Fix the document and retry.",
        source_id=source_id,
    )
