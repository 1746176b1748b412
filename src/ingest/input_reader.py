"""Source document discovery for ingestion.

This module resolves a local file or directory into an ordered list of
per-domain JSON documents and reads their raw text.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import SOURCE_FILE_EXTENSION
from core.errors import FileReadError


def list_source_files(source: str | Path) -> list[Path]:
    """List per-domain JSON documents under a source path.

    Args:
        source: A single JSON file or a directory of JSON files.

    Returns:
        Source files in sorted enumeration order.

    Raises:
        FileReadError: If the path is missing or holds no JSON files.
    """
    source_path = Path(source).expanduser()
    if not source_path.exists():
        raise FileReadError(
            f"Failed to read source at {source_path}: path does not exist. "
            "Provide an existing file or directory.",
            source_id=str(source_path),
        )
    if source_path.is_file():
        return [source_path]
    source_files = [
        file_path
        for file_path in sorted(source_path.rglob(f"*{SOURCE_FILE_EXTENSION}"))
        if file_path.is_file()
    ]
    if not source_files:
        raise FileReadError(
            f"No {SOURCE_FILE_EXTENSION} documents found under {source_path}. "
            "Point the source at a directory of per-domain documents.",
            source_id=str(source_path),
        )
    return source_files


def read_source_text(file_path: Path) -> str:
    """Read one source document as UTF-8 text.

    Args:
        file_path: Document path.

    Returns:
        Raw document text.

    Raises:
        FileReadError: If the file cannot be opened or decoded.
    """
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise FileReadError(
            f"Failed to read source document {file_path}: {error}. "
            "Check the file exists and is readable UTF-8.",
            source_id=str(file_path),
        ) from error
