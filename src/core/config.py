"""Runtime configuration model for report runs.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_LOAD_WORKERS, DEFAULT_OUTPUT_ROOT
from core.errors import RadarConfigError


@dataclass(frozen=True)
class RadarConfig:
    """Validated runtime configuration.

    Attributes:
        output_root: Default directory for written report tables.
        load_workers: Number of threads used to load source documents.
    """

    output_root: Path
    load_workers: int

    @classmethod
    def from_env(cls) -> "RadarConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RadarConfigError: If environment values are invalid.
        """
        output_root_value = os.getenv("RADAR_OUTPUT_ROOT", str(DEFAULT_OUTPUT_ROOT))
        load_workers_value = os.getenv("RADAR_LOAD_WORKERS", str(DEFAULT_LOAD_WORKERS))
        return cls(
            output_root=Path(output_root_value).expanduser().resolve(),
            load_workers=_parse_load_workers(load_workers_value),
        )


def _parse_load_workers(raw_value: str) -> int:
    """Parse the load worker count environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive worker count.

    Raises:
        RadarConfigError: If value is not a positive integer.
    """
    try:
        workers = int(raw_value)
    except ValueError as error:
        raise RadarConfigError(
            "Invalid RADAR_LOAD_WORKERS value: "
            f"expected integer, got '{raw_value}'. "
            "Set RADAR_LOAD_WORKERS to a positive number."
        ) from error
    if workers < 1:
        raise RadarConfigError(
            f"Invalid RADAR_LOAD_WORKERS value {workers}: expected value >= 1."
        )
    return workers
