"""Tracker Radar report CLI entry points.
This module exposes commands for writing report tables and printing
analysis summaries. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.analysis_settings import load_analysis_settings
from core.config import RadarConfig
from core.errors import RadarConfigError
from core.types import AnalysisReport
from store.report_sdk import RadarClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="radar", description="Tracker Radar report CLI")
    parser.add_argument(
        "--load-workers",
        type=int,
        help="Override RADAR_LOAD_WORKERS for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_report_command(subparsers)
    _add_summary_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the report CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    client = _build_client(args.load_workers)
    if args.command == "report":
        return _run_report_command(client, args)
    if args.command == "summary":
        return _run_summary_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(load_workers: int | None) -> RadarClient:
    config = RadarConfig.from_env()
    if load_workers is not None:
        if load_workers < 1:
            raise RadarConfigError(
                f"Invalid --load-workers value {load_workers}: expected value >= 1."
            )
        config = replace(config, load_workers=load_workers)
    return RadarClient(config)


def _run_report_command(client: RadarClient, args: argparse.Namespace) -> int:
    """Handle report command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    settings = load_analysis_settings(args.settings)
    output_dir = Path(args.output_dir) if args.output_dir else None
    manifest_path = client.write_report(args.source, output_dir, settings)
    print(manifest_path)
    return 0


def _run_summary_command(client: RadarClient, args: argparse.Namespace) -> int:
    """Handle summary command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    settings = load_analysis_settings(args.settings)
    report = client.analyze(client.build_corpus(args.source), settings)
    for line in format_summary(report):
        print(line)
    return 0


def format_summary(report: AnalysisReport) -> list[str]:
    """Render analysis results as tab-separated text sections."""
    lines = ["# top domains"]
    for rank, scalars in enumerate(report.top_domains, 1):
        lines.append(
            f"{rank}\t{scalars.domain}\t{scalars.owner or '-'}\t"
            f"{scalars.prevalence}\t{scalars.sites}"
        )
    lines.append("# category counts")
    for entry in report.category_frequency.counts:
        lines.append(f"{entry.category}\t{entry.count}")
    lines.append("# top categories")
    for entry in report.category_frequency.top:
        lines.append(f"{entry.category}\t{entry.count}")
    lines.append("# category leaders")
    for leader in report.category_leaders:
        lines.append(f"{leader.order}\t{leader.key}\t{leader.prevalence}")
    return lines


def _add_report_command(subparsers: Any) -> None:
    """Register report subcommand."""
    parser = subparsers.add_parser("report", help="Write report tables for a source directory")
    parser.add_argument("source", help="Domain document file or directory")
    parser.add_argument("--output-dir", help="Output directory, defaults to RADAR_OUTPUT_ROOT")
    parser.add_argument("--settings", help="Optional YAML analysis settings file")


def _add_summary_command(subparsers: Any) -> None:
    """Register summary subcommand."""
    parser = subparsers.add_parser("summary", help="Print analysis results as text")
    parser.add_argument("source", help="Domain document file or directory")
    parser.add_argument("--settings", help="Optional YAML analysis settings file")
