"""Tracker Radar report exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class RadarError(Exception):
    """Base exception for all report failures."""


class RadarConfigError(RadarError):
    """Raised for invalid runtime configuration or analysis settings."""


class RadarDependencyError(RadarError):
    """Raised when a runtime dependency is missing."""


class RadarExportError(RadarError):
    """Raised when report tables cannot be written."""


class RadarIngestError(RadarError):
    """Raised for source reading and parsing failures.

    Attributes:
        source_id: Identity of the offending source document.
    """

    def __init__(self, message: str, source_id: str) -> None:
        super().__init__(message)
        self.source_id = source_id


class FileReadError(RadarIngestError):
    """Raised when a source document cannot be opened or read."""


class ParseError(RadarIngestError):
    """Raised when a source document is not well-formed JSON."""


class SchemaViolation(RadarIngestError):
    """Raised when a mandatory field is missing or any field is mistyped."""
