"""Deletion validator.

Re-checks selected entries immediately before deletion so that a path
which disappeared, or was replaced by something of a different kind,
since the scan is never removed. This narrows the window between scan
and deletion; it cannot close it.
"""

import logging
import os
import stat
from collections.abc import Iterable

from diskcleaner.models.deletion import (
    DeletionFailure,
    DeletionPlan,
    ErrorKind,
    ValidationResult,
)
from diskcleaner.models.entry import AnalysisResult, Entry, EntryKind

logger = logging.getLogger(__name__)


def _current_kind(path: str) -> EntryKind | None:
    """Stat a path (following symlinks) and return its kind, or None if unreadable."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return None
    return EntryKind.DIRECTORY if stat.S_ISDIR(mode) else EntryKind.FILE


def validate_entry(entry: Entry) -> ValidationResult:
    """Re-stat one entry and compare it with what the scan recorded.

    Args:
        entry: Entry from a prior analysis result.

    Returns:
        ValidationResult for the entry's path.
    """
    present = os.path.lexists(entry.path)
    matches = present and _current_kind(entry.path) == entry.kind
    return ValidationResult(
        path=entry.path,
        still_present=present,
        still_matches_recorded_kind=matches,
    )


def parent_writable(path: str) -> bool:
    """Check if the directory holding ``path`` allows removing entries from it."""
    parent = os.path.dirname(os.path.abspath(path))
    return os.access(parent, os.W_OK | os.X_OK)


def _rejection_message(validation: ValidationResult) -> str:
    if not validation.still_present:
        return "No longer exists"
    return "Changed type since the scan"


def validate_selection(result: AnalysisResult, selection: Iterable[str]) -> DeletionPlan:
    """Validate a selection of paths drawn from an analysis result.

    Paths that vanished or changed kind since the scan are excluded from
    the batch and reported as VANISHED_OR_CHANGED. Paths that are not part
    of ``result`` are rejected the same way, since there is no recorded
    kind to compare against. Duplicate paths are collapsed.

    Validated entries whose parent directory is not writable stay in the
    batch and are also listed in ``unwritable`` as PERMISSION_DENIED so
    the caller can warn before confirming.

    Args:
        result: The analysis result the selection was made from.
        selection: Absolute paths chosen for deletion.

    Returns:
        DeletionPlan with the validated entries and the rejections.
    """
    validations: list[ValidationResult] = []
    entries: list[Entry] = []
    rejected: list[DeletionFailure] = []
    unwritable: list[DeletionFailure] = []
    by_path = {entry.path: entry for entry in result.entries}

    for path in dict.fromkeys(selection):
        entry = by_path.get(path)
        if entry is None:
            validation = ValidationResult(
                path=path,
                still_present=os.path.lexists(path),
                still_matches_recorded_kind=False,
            )
            validations.append(validation)
            rejected.append(
                DeletionFailure(
                    path=path,
                    error_kind=ErrorKind.VANISHED_OR_CHANGED,
                    message="Not part of the analysis result",
                )
            )
            logger.warning("Rejected %s: not part of the analysis result", path)
            continue

        validation = validate_entry(entry)
        validations.append(validation)
        if validation.is_valid:
            entries.append(entry)
            if not parent_writable(path):
                unwritable.append(
                    DeletionFailure(
                        path=path,
                        error_kind=ErrorKind.PERMISSION_DENIED,
                        message="No write permission on the parent directory",
                    )
                )
                logger.info("No write permission on the parent of %s", path)
            continue

        message = _rejection_message(validation)
        rejected.append(
            DeletionFailure(
                path=path,
                error_kind=ErrorKind.VANISHED_OR_CHANGED,
                message=message,
            )
        )
        logger.warning("Rejected %s: %s", path, message.lower())

    return DeletionPlan(
        validations=tuple(validations),
        entries=tuple(entries),
        rejected=tuple(rejected),
        unwritable=tuple(unwritable),
    )
