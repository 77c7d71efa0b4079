"""Scan command implementation.

Analyzes a directory and lists its entries sorted by size.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from diskcleaner.cli.display import create_entries_table, print_analysis_summary
from diskcleaner.cli.types import (
    DepthOption,
    DirsOnlyOption,
    FilesOnlyOption,
    JobsOption,
    MinSizeOption,
    OutputFormat,
    PathArgument,
    load_settings_or_exit,
    scan_or_exit,
)
from diskcleaner.models.entry import AnalysisResult, Entry
from diskcleaner.utils.formatting import console, print_info


def scan(
    ctx: typer.Context,
    path: PathArgument = Path("."),
    depth: DepthOption = None,
    min_size: MinSizeOption = None,
    dirs_only: DirsOnlyOption = False,
    files_only: FilesOnlyOption = False,
    jobs: JobsOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-l",
            help="Limit number of rows shown.",
        ),
    ] = None,
) -> None:
    """Analyze a directory and list its entries by size.

    Examples:
        disk-cleaner scan                     # Current directory
        disk-cleaner scan ~/Downloads -d 2    # Two levels deep
        disk-cleaner scan / --min-size 104857600 --dirs-only
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    settings = load_settings_or_exit()

    if not quiet and output_format == OutputFormat.TABLE:
        console.print(f"[header]Analyzing:[/] {path}")

    result = scan_or_exit(
        path,
        depth=depth,
        min_size=min_size,
        dirs_only=dirs_only,
        files_only=files_only,
        jobs=jobs,
        settings=settings,
    )

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(_result_to_dict(result, limit)))
        return

    if result.is_empty:
        print_info("No entries found matching the criteria.")
        return

    shown = result.entries[:limit] if limit else result.entries
    console.print(create_entries_table(shown))
    print_analysis_summary(result, shown=len(shown))


def _entry_to_dict(entry: Entry) -> dict[str, object]:
    return {
        "path": entry.path,
        "display_name": entry.display_name,
        "kind": entry.kind.value,
        "size_bytes": entry.size_bytes,
        "degraded": entry.degraded,
    }


def _result_to_dict(result: AnalysisResult, limit: int | None) -> dict[str, object]:
    entries = result.entries[:limit] if limit else result.entries
    return {
        "root": result.root,
        "total_size_bytes": result.total_size_bytes,
        "warnings": result.warnings,
        "entries": [_entry_to_dict(e) for e in entries],
    }
