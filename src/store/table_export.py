"""Report table export helpers.

This module writes analysis results to CSV tables with pyarrow and
records a manifest for downstream chart rendering. Null values are
written as empty cells.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone
import json
from pathlib import Path
from typing import Any, Sequence

import pyarrow as pa
import pyarrow.csv as pa_csv

from core.constants import (
    CATEGORY_COUNTS_FILE_NAME,
    CATEGORY_LEADERS_FILE_NAME,
    REPORT_MANIFEST_FILE_NAME,
    TOP_CATEGORIES_FILE_NAME,
    TOP_DOMAINS_FILE_NAME,
)
from core.errors import RadarExportError
from core.types import AnalysisReport

TOP_DOMAINS_SCHEMA = pa.schema(
    [
        ("domain", pa.string()),
        ("owner", pa.string()),
        ("prevalence", pa.float64()),
        ("sites", pa.int64()),
        ("fingerprinting", pa.int64()),
        ("cookies", pa.float64()),
        ("performance_time", pa.float64()),
        ("performance_size", pa.float64()),
        ("performance_cpu", pa.float64()),
        ("performance_cache", pa.float64()),
    ]
)
CATEGORY_COUNTS_SCHEMA = pa.schema([("category", pa.string()), ("count", pa.int64())])
CATEGORY_LEADERS_SCHEMA = pa.schema(
    [
        ("order", pa.int64()),
        ("category", pa.string()),
        ("domain", pa.string()),
        ("owner", pa.string()),
        ("prevalence", pa.float64()),
        ("fingerprinting", pa.int64()),
        ("cookies", pa.float64()),
    ]
)


def write_report_tables(report: AnalysisReport, output_dir: str | Path) -> Path:
    """Write every analysis table plus a manifest.

    Args:
        report: Analysis results.
        output_dir: Destination directory, created when missing.

    Returns:
        Path to the written manifest file.

    Raises:
        RadarExportError: If the directory or any file cannot be written.
    """
    export_dir = _prepare_output_dir(output_dir)
    tables = {
        TOP_DOMAINS_FILE_NAME: build_table(report.top_domains, TOP_DOMAINS_SCHEMA),
        CATEGORY_COUNTS_FILE_NAME: build_table(
            report.category_frequency.counts, CATEGORY_COUNTS_SCHEMA
        ),
        TOP_CATEGORIES_FILE_NAME: build_table(
            report.category_frequency.top, CATEGORY_COUNTS_SCHEMA
        ),
        CATEGORY_LEADERS_FILE_NAME: build_table(
            report.category_leaders, CATEGORY_LEADERS_SCHEMA
        ),
    }
    for file_name, table in tables.items():
        _write_csv(export_dir / file_name, table)
    return _write_manifest(export_dir, tables)


def build_table(rows: Sequence[Any], schema: pa.Schema) -> pa.Table:
    """Convert dataclass rows into a pyarrow table.

    Args:
        rows: Frozen dataclass rows whose fields cover the schema.
        schema: Target column schema.

    Returns:
        Table with one column per schema field, in schema order.
    """
    payloads = [asdict(row) for row in rows]
    columns = {
        field_name: [payload[field_name] for payload in payloads]
        for field_name in schema.names
    }
    return pa.table(columns, schema=schema)


def _prepare_output_dir(output_dir: str | Path) -> Path:
    export_dir = Path(output_dir).expanduser().resolve()
    try:
        export_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise RadarExportError(
            f"Failed to create report directory {export_dir}: {error}. "
            "Check write permissions."
        ) from error
    return export_dir


def _write_csv(table_path: Path, table: pa.Table) -> None:
    try:
        pa_csv.write_csv(table, str(table_path))
    except (OSError, pa.ArrowException) as error:
        raise RadarExportError(
            f"Failed to write report table {table_path}: {error}. "
            "Check write permissions and available disk space."
        ) from error


def _write_manifest(export_dir: Path, tables: dict[str, pa.Table]) -> Path:
    """Write a manifest listing each table and its row count."""
    manifest_path = export_dir / REPORT_MANIFEST_FILE_NAME
    payload = {
        "created_at": datetime.now(timezone.utc).isoformat(),
        "tables": {file_name: table.num_rows for file_name, table in tables.items()},
    }
    try:
        manifest_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    except OSError as error:
        raise RadarExportError(
            f"Failed to write report manifest {manifest_path}: {error}. "
            "Check write permissions and available disk space."
        ) from error
    return manifest_path
