"""Corpus ingest orchestration.

This module coordinates document discovery, loading, normalization,
and category expansion, then aggregates every domain's rows into one
immutable corpus. Ingestion is fail-fast: the first bad document
aborts the run and no partial corpus is returned.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Sequence

from core.config import RadarConfig
from core.errors import RadarIngestError
from core.logging_config import get_logger
from core.types import Corpus, FlatRow
from ingest.input_reader import list_source_files
from ingest.record_loader import load_record
from transforms.category_expansion import expand
from transforms.record_normalizer import normalize

_LOGGER = get_logger(__name__)


def build_corpus(source: str | Path, config: RadarConfig) -> Corpus:
    """Ingest a source file or directory into a corpus.

    Args:
        source: Domain document file or directory.
        config: Runtime configuration with loader worker count.

    Returns:
        Corpus in file enumeration order.

    Raises:
        FileReadError: If discovery or a file read fails.
        ParseError: If a document is not well-formed JSON.
        SchemaViolation: If a document breaks the field schema.
    """
    source_files = list_source_files(source)
    domain_rows = _load_all_domain_rows(source_files, config.load_workers)
    corpus = aggregate(domain_rows)
    _LOGGER.info(
        "corpus_built",
        source=str(source),
        domain_count=len(source_files),
        row_count=len(corpus),
        load_workers=config.load_workers,
    )
    return corpus


def load_domain_rows(source_path: Path) -> tuple[FlatRow, ...]:
    """Load one document and expand it into flat rows.

    Args:
        source_path: Domain document path.

    Returns:
        The domain's rows, one per category tag or one sentinel row.
    """
    record = load_record(source_path)
    rows = expand(normalize(record), record.categories)
    _LOGGER.debug(
        "source_loaded",
        source=str(source_path),
        domain=record.domain,
        row_count=len(rows),
    )
    return rows


def aggregate(domain_rows: Iterable[Sequence[FlatRow]]) -> Corpus:
    """Concatenate per-domain rows into a corpus.

    Args:
        domain_rows: Row groups in domain enumeration order.

    Returns:
        Corpus preserving group order and row order within groups.
    """
    rows: list[FlatRow] = []
    for group in domain_rows:
        rows.extend(group)
    return Corpus(rows=tuple(rows))


def _load_all_domain_rows(
    source_files: list[Path],
    load_workers: int,
) -> list[tuple[FlatRow, ...]]:
    """Load every document, keeping enumeration order for any worker count."""
    try:
        if load_workers <= 1:
            return [load_domain_rows(source_path) for source_path in source_files]
        with ThreadPoolExecutor(max_workers=load_workers) as executor:
            return list(executor.map(load_domain_rows, source_files))
    except RadarIngestError as error:
        _LOGGER.error(
            "source_rejected",
            source=error.source_id,
            error_type=type(error).__name__,
            reason=str(error),
        )
        raise
