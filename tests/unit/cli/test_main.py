"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from core.errors import RadarConfigError, SchemaViolation
from tests.fixture_paths import fixture_path


def test_cli_report_writes_manifest(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """CLI report should print the written manifest path."""
    output_dir = tmp_path / "report"
    args = ["report", str(fixture_path("domains")), "--output-dir", str(output_dir)]

    exit_code = main(args)
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == str(output_dir.resolve() / "report_manifest.json")


def test_cli_summary_prints_sections(capsys: pytest.CaptureFixture[str]) -> None:
    """CLI summary should print every analysis section."""
    args = [
        "summary",
        str(fixture_path("domains")),
        "--settings",
        str(fixture_path("settings.yaml")),
    ]

    exit_code = main(args)
    lines = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert lines[0] == "# top domains"
    assert lines[1].startswith("1\tcdn.example\t-\t0.5")
    assert "# category leaders" in lines
    assert lines[-2:] == [
        "1\tadnetwork.example|Ad Motivated Tracking\t0.4",
        "2\tadnetwork.example|Advertising\t0.4",
    ]


def test_cli_propagates_ingest_errors() -> None:
    """Ingest failures surface to the caller."""
    with pytest.raises(SchemaViolation):
        main(["summary", str(fixture_path("invalid/missing_prevalence.json"))])


def test_cli_rejects_non_positive_load_workers() -> None:
    """Worker override must be positive."""
    with pytest.raises(RadarConfigError):
        main(["--load-workers", "0", "summary", str(fixture_path("domains"))])
