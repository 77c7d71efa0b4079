"""Shared types and utilities for CLI commands.

This module provides the scan options shared by ``scan`` and ``clean``
and the helpers that turn invocation errors into clean exits.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from diskcleaner.analysis.analyzer import run_scan
from diskcleaner.analysis.options import ScanOptions
from diskcleaner.core.errors import ConfigurationError, InvalidRootError, SettingsError
from diskcleaner.core.settings import Settings, load_settings
from diskcleaner.models.entry import AnalysisResult
from diskcleaner.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


PathArgument = Annotated[
    Path,
    typer.Argument(help="Directory to analyze.", show_default=True),
]
DepthOption = Annotated[
    int | None,
    typer.Option(
        "--depth",
        "-d",
        help="Levels flattened into report rows (1 = immediate children).",
    ),
]
MinSizeOption = Annotated[
    int | None,
    typer.Option(
        "--min-size",
        "-m",
        help="Only show entries of at least this many bytes.",
    ),
]
DirsOnlyOption = Annotated[
    bool,
    typer.Option("--dirs-only", help="Show only directories."),
]
FilesOnlyOption = Annotated[
    bool,
    typer.Option("--files-only", help="Show only files."),
]
JobsOption = Annotated[
    int | None,
    typer.Option(
        "--jobs",
        "-j",
        help="Concurrent sizing workers (default: processor count).",
    ),
]


def load_settings_or_exit() -> Settings:
    """Load user settings, exiting with code 1 if the file is invalid."""
    try:
        return load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def scan_or_exit(
    path: Path,
    *,
    depth: int | None,
    min_size: int | None,
    dirs_only: bool,
    files_only: bool,
    jobs: int | None,
    settings: Settings,
) -> AnalysisResult:
    """Validate options and run a scan.

    Invocation errors (conflicting filters, out-of-range values, invalid
    root) are reported and end the command with exit code 1 before any
    result is produced.

    Returns:
        Filtered and sorted AnalysisResult.
    """
    try:
        options = ScanOptions.from_cli(
            path,
            depth=depth,
            min_size=min_size,
            dirs_only=dirs_only,
            files_only=files_only,
            jobs=jobs,
            settings=settings,
        )
        return run_scan(options)
    except (ConfigurationError, InvalidRootError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
