"""Shared Rich display functions for analysis and deletion results.

Provides reusable table builders and summary printers used by the
``scan`` and ``clean`` commands.
"""

from rich.table import Table

from diskcleaner.models.deletion import DeletionOutcome, DeletionPlan, DeletionSummary
from diskcleaner.models.entry import AnalysisResult, Entry
from diskcleaner.utils.formatting import console, format_size, print_success, print_warning

DEGRADED_MARKER = "*"


def _kind_cell(entry: Entry) -> str:
    if entry.is_directory:
        return "[entry.directory]DIR[/]"
    return "[entry.file]FILE[/]"


def _size_cell(entry: Entry) -> str:
    size = format_size(entry.size_bytes)
    if entry.degraded:
        return f"[entry.degraded]{size}{DEGRADED_MARKER}[/]"
    return f"[entry.size]{size}[/]"


def create_entries_table(
    entries: list[Entry] | tuple[Entry, ...],
    title: str = "Directory Contents (sorted by size)",
) -> Table:
    """Create a Rich table of analysis entries.

    Rows are numbered from 1; these numbers are what the selection
    prompt refers to.

    Args:
        entries: Entries in display order.
        title: Table title.

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("Size", justify="right")
    table.add_column("Type", width=4)
    table.add_column("Name", overflow="fold")

    for number, entry in enumerate(entries, start=1):
        name = entry.display_name
        if entry.is_directory:
            name = f"[entry.directory]{name}/[/]"
        table.add_row(str(number), _size_cell(entry), _kind_cell(entry), name)

    return table


def print_analysis_summary(result: AnalysisResult, shown: int | None = None) -> None:
    """Print totals, truncation note and scan warnings for a result.

    Args:
        result: The analysis result that was displayed.
        shown: Number of rows actually shown, if the table was limited.
    """
    console.print(
        f"\n[dim]Total: {format_size(result.total_size_bytes)} "
        f"in {len(result)} entries[/dim]"
    )
    if shown is not None and shown < len(result):
        console.print(f"[dim](showing {shown} of {len(result)})[/dim]")

    degraded = result.degraded_count
    if degraded:
        noun = "entry" if degraded == 1 else "entries"
        print_warning(
            f"{degraded} {noun} marked '{DEGRADED_MARKER}' could not be fully read; "
            "sizes are lower bounds."
        )
    if result.warnings:
        print_warning(f"Skipped {result.warnings} unreadable item(s) while listing.")


def create_plan_table(plan: DeletionPlan, dry_run: bool = False) -> Table:
    """Create a Rich table of the entries about to be deleted.

    Args:
        plan: Validated deletion plan.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table configured for planned deletions.
    """
    title = "Planned Deletions (dry-run)" if dry_run else "Planned Deletions"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Size", justify="right")
    table.add_column("Type", width=4)
    table.add_column("Path", overflow="fold")

    for entry in plan.entries:
        table.add_row(_size_cell(entry), _kind_cell(entry), entry.path)

    return table


def create_results_table(outcome: DeletionOutcome) -> Table:
    """Create a Rich table of per-entry deletion results.

    Args:
        outcome: Outcome of the deletion batch.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=10)
    table.add_column("Path", overflow="fold")
    table.add_column("Details", style="muted")

    for path in outcome.succeeded:
        if outcome.dry_run:
            table.add_row("[info]dry-run[/]", path, "Would delete")
        else:
            table.add_row("[success]deleted[/]", path, "")

    for failure in outcome.failed:
        detail = failure.error_kind.value
        if failure.message:
            detail = f"{detail}: {failure.message}"
        table.add_row("[error]failed[/]", failure.path, detail)

    return table


def print_deletion_summary(summary: DeletionSummary) -> None:
    """Print the folded deletion summary.

    Args:
        summary: Summary produced by the result reporter.
    """
    freed = format_size(summary.bytes_freed)

    if summary.dry_run:
        console.print(
            f"\n[info]Dry-run: {summary.succeeded_count} item(s) would be deleted, "
            f"{freed} would be freed.[/]"
        )
    elif summary.all_succeeded:
        print_success(f"\nSuccessfully deleted {summary.succeeded_count} item(s).")
    else:
        console.print(
            f"\n[success]{summary.succeeded_count} succeeded[/success], "
            f"[error]{summary.failed_count} failed[/error]"
        )

    for failure in summary.failures:
        reason = failure.message or failure.error_kind.value
        console.print(f"  [error]-[/] {failure.path} [muted]({reason})[/muted]")

    if not summary.dry_run and summary.bytes_freed > 0:
        console.print(f"\nTotal space freed: [entry.size]{freed}[/]")
