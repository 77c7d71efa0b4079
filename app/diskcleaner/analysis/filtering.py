"""Filter and sort stage for analysis results."""

from collections.abc import Iterable

from diskcleaner.models.entry import AnalysisResult, Entry
from diskcleaner.models.filters import FilterSpec


def _sort_key(entry: Entry) -> tuple[int, str]:
    return (-entry.size_bytes, entry.display_name)


def sort_entries(entries: Iterable[Entry]) -> tuple[Entry, ...]:
    """Sort entries by size descending, ties broken by display name ascending.

    Args:
        entries: Entries in any order.

    Returns:
        Sorted tuple of entries.
    """
    return tuple(sorted(entries, key=_sort_key))


def apply_filter(result: AnalysisResult, spec: FilterSpec) -> AnalysisResult:
    """Filter and sort an analysis result.

    An entry is kept if it meets the size threshold (when set) and the
    kind filter (when set). The input result is left untouched.

    Args:
        result: Result to filter.
        spec: Filter to apply.

    Returns:
        New AnalysisResult with the kept entries, sorted, and the total
        recomputed over those entries.
    """
    kept = [entry for entry in result.entries if spec.accepts(entry)]
    return AnalysisResult.from_entries(
        root=result.root,
        entries=sort_entries(kept),
        warnings=result.warnings,
    )
