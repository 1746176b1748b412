"""YAML settings for the corpus analyses.

This module loads and validates the optional settings file that overrides
selection limits for the ranking, category count, and leader analyses.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, cast

import yaml

from core.errors import RadarConfigError
from core.types import AnalysisSettings

_SETTING_FIELDS = ("ranking_limit", "top_category_count", "per_category_limit")


def load_analysis_settings(settings_path: str | None) -> AnalysisSettings:
    """Load analysis settings from a YAML file.

    Args:
        settings_path: Path to the YAML file, or None for defaults.

    Returns:
        Validated settings, with defaults for omitted fields.

    Raises:
        RadarConfigError: If the file is missing, malformed, or invalid.
    """
    if settings_path is None:
        return AnalysisSettings()
    payload = _load_yaml_payload(settings_path)
    if payload is None:
        return AnalysisSettings()
    settings_mapping = _expect_mapping(payload)
    _validate_keys(settings_mapping)
    overrides = {
        field_name: _parse_positive_int(settings_mapping, field_name)
        for field_name in _SETTING_FIELDS
        if field_name in settings_mapping
    }
    return AnalysisSettings(**overrides)


def _load_yaml_payload(settings_path: str) -> object:
    settings_file = Path(settings_path).expanduser().resolve()
    if not settings_file.exists():
        raise RadarConfigError(
            f"Settings file does not exist at {settings_file}. Provide a valid YAML file path."
        )
    try:
        return cast(object, yaml.safe_load(settings_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise RadarConfigError(
            f"Failed to read settings at {settings_file}: {error}. Check file permissions."
        ) from error
    except yaml.YAMLError as error:
        raise RadarConfigError(
            f"Failed to parse YAML settings at {settings_file}: {error}. Fix YAML syntax."
        ) from error


def _expect_mapping(value: object) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        return cast(Mapping[str, object], value)
    raise RadarConfigError(
        f"Invalid settings root: expected object mapping, got {type(value).__name__}."
    )


def _parse_positive_int(mapping: Mapping[str, object], field_name: str) -> int:
    raw_value = mapping[field_name]
    if isinstance(raw_value, bool) or not isinstance(raw_value, int) or raw_value < 1:
        raise RadarConfigError(
            f"Settings field '{field_name}' must be a positive integer, got {raw_value!r}."
        )
    return raw_value


def _validate_keys(settings_mapping: Mapping[str, object]) -> None:
    unknown_keys = sorted(str(key) for key in set(settings_mapping) - set(_SETTING_FIELDS))
    if unknown_keys:
        raise RadarConfigError(
            f"Settings contain unknown fields: {', '.join(unknown_keys)}. "
            f"Supported fields: {', '.join(_SETTING_FIELDS)}."
        )
