"""Clean command implementation.

Runs the whole pipeline: scan, present, select, validate, confirm,
delete and report. Each stage hands its result to the next; nothing is
re-scanned after a partial deletion.
"""

from pathlib import Path
from typing import Annotated

import typer

from diskcleaner.cli.display import (
    create_entries_table,
    create_plan_table,
    create_results_table,
    print_analysis_summary,
    print_deletion_summary,
)
from diskcleaner.cli.selection import parse_selection
from diskcleaner.cli.types import (
    DepthOption,
    DirsOnlyOption,
    FilesOnlyOption,
    JobsOption,
    MinSizeOption,
    PathArgument,
    load_settings_or_exit,
    scan_or_exit,
)
from diskcleaner.deletion.executor import DeletionExecutor
from diskcleaner.deletion.reporter import summarize
from diskcleaner.deletion.validator import validate_selection
from diskcleaner.models.entry import AnalysisResult
from diskcleaner.utils.formatting import (
    console,
    format_size,
    print_error,
    print_info,
    print_warning,
)

SELECTION_PROMPT = "Select items to delete (e.g. 1,3,5-7 or 'all'; empty to cancel)"


def clean(
    ctx: typer.Context,
    path: PathArgument = Path("."),
    depth: DepthOption = None,
    min_size: MinSizeOption = None,
    dirs_only: DirsOnlyOption = False,
    files_only: FilesOnlyOption = False,
    jobs: JobsOption = None,
    select: Annotated[
        str | None,
        typer.Option(
            "--select",
            "-s",
            help="Rows to delete, e.g. '1,3,5-7' or 'all'. Prompts if omitted.",
        ),
    ] = None,
    dry_run: Annotated[
        bool | None,
        typer.Option(
            "--dry-run/--no-dry-run",
            help="Show what would be deleted without deleting.",
            show_default=False,
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Analyze a directory, then delete selected entries.

    Selected entries are re-checked right before deletion; anything that
    vanished or changed type since the scan is skipped and reported.

    Examples:
        disk-cleaner clean ~/Downloads
        disk-cleaner clean . --select 1-3 --dry-run
        disk-cleaner clean /tmp/build --dirs-only --select all --yes
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    settings = load_settings_or_exit()
    simulate = settings.dry_run if dry_run is None else dry_run

    if not quiet:
        console.print(f"[header]Analyzing:[/] {path}")

    # Scan
    result = scan_or_exit(
        path,
        depth=depth,
        min_size=min_size,
        dirs_only=dirs_only,
        files_only=files_only,
        jobs=jobs,
        settings=settings,
    )
    if result.is_empty:
        print_info("No entries found matching the criteria.")
        return

    # Present
    console.print(create_entries_table(result.entries))
    print_analysis_summary(result)

    # Select
    selection = _resolve_selection(result, select)
    if not selection:
        print_info("No items selected. Exiting.")
        return

    # Validate
    plan = validate_selection(result, selection)
    for failure in plan.rejected:
        print_warning(f"Skipping {failure.path}: {failure.message}")
    if plan.unwritable:
        print_warning("The following items may not be deletable (permission denied):")
        for failure in plan.unwritable:
            console.print(f"  {failure.path}", style="muted", markup=False, soft_wrap=True)
        console.print("  [muted]You may need administrator privileges to delete these items.[/muted]")

    # Confirm
    if not plan.is_empty:
        console.print()
        console.print(create_plan_table(plan, dry_run=simulate))
        console.print(f"\nTotal size to be freed: [entry.size]{format_size(plan.planned_bytes)}[/]")

        if not simulate and not yes:
            confirmed = typer.confirm(
                "Are you absolutely sure you want to delete these items?",
                default=False,
            )
            if not confirmed:
                print_info("Deletion cancelled by user.")
                raise typer.Exit(code=1)
    else:
        print_error("No valid items to delete.")

    # Execute
    outcome = DeletionExecutor(dry_run=simulate).execute(plan)

    # Report
    console.print()
    console.print(create_results_table(outcome))
    print_deletion_summary(summarize(outcome))


def _resolve_selection(result: AnalysisResult, select: str | None) -> list[str]:
    """Turn a --select value or interactive answer into entry paths.

    An invalid --select value exits with code 1; an invalid interactive
    answer is reported and asked again.
    """
    count = len(result)

    if select is not None:
        try:
            indices = parse_selection(select, count)
        except ValueError as e:
            print_error(f"Invalid selection: {e}")
            raise typer.Exit(code=1) from e
        return [result.entries[i].path for i in indices]

    while True:
        answer: str = typer.prompt(SELECTION_PROMPT, default="", show_default=False)
        try:
            indices = parse_selection(answer, count)
        except ValueError as e:
            print_error(f"Invalid selection: {e}")
            continue
        return [result.entries[i].path for i in indices]
