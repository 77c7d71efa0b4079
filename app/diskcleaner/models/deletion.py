"""Deletion models.

This module defines the data structures that flow through the guarded
deletion pipeline: per-path validation results, the validated plan,
per-path failures, the batch outcome and the folded summary.
"""

from dataclasses import dataclass
from enum import Enum

from diskcleaner.models.entry import Entry


class ErrorKind(str, Enum):
    """Classification of a recoverable per-entry error.

    Attributes:
        PERMISSION_DENIED: Access was refused. Before deletion this flags an
            entry whose parent directory is not writable; the entry stays in
            the plan and the removal itself reports the outcome.
        VANISHED_OR_CHANGED: The entry disappeared or changed kind since the scan.
        DELETION_FAILED: The removal call itself failed.
    """

    PERMISSION_DENIED = "permission_denied"
    VANISHED_OR_CHANGED = "vanished_or_changed"
    DELETION_FAILED = "deletion_failed"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of re-checking one selected path right before deletion.

    Attributes:
        path: Absolute path that was checked.
        still_present: Whether the path still exists.
        still_matches_recorded_kind: Whether it is still the same kind
            (file or directory) it was when scanned.
    """

    path: str
    still_present: bool
    still_matches_recorded_kind: bool

    @property
    def is_valid(self) -> bool:
        """Check if the path may proceed to deletion."""
        return self.still_present and self.still_matches_recorded_kind


@dataclass(frozen=True, slots=True)
class DeletionFailure:
    """A selected path that was not deleted.

    Attributes:
        path: Absolute path of the entry.
        error_kind: Why the entry was not deleted.
        message: Human-readable detail, if available.
    """

    path: str
    error_kind: ErrorKind
    message: str | None = None


@dataclass(frozen=True, slots=True)
class DeletionPlan:
    """Validated deletion batch, ready for confirmation and execution.

    Attributes:
        validations: One validation result per selected path, in selection order.
        entries: Entries that passed validation and will be deleted.
        rejected: Entries excluded by validation.
        unwritable: Planned entries that will probably fail for lack of
            write permission on their parent directory. Informational only.
    """

    validations: tuple[ValidationResult, ...]
    entries: tuple[Entry, ...]
    rejected: tuple[DeletionFailure, ...]
    unwritable: tuple[DeletionFailure, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Check if there is nothing left to delete."""
        return not self.entries

    @property
    def planned_bytes(self) -> int:
        """Bytes that would be freed if every validated entry is deleted."""
        return sum(e.size_bytes for e in self.entries)


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Outcome of a deletion batch.

    Every selected path appears in exactly one of ``succeeded`` or ``failed``.

    Attributes:
        succeeded: Paths that were deleted, in processing order.
        failed: Paths that were not deleted, with the reason.
        bytes_freed: Sum of the scan-time sizes of succeeded entries.
        dry_run: Whether the batch was simulated.
    """

    succeeded: tuple[str, ...]
    failed: tuple[DeletionFailure, ...]
    bytes_freed: int
    dry_run: bool = False

    @property
    def total(self) -> int:
        """Number of paths accounted for by this outcome."""
        return len(self.succeeded) + len(self.failed)


@dataclass(frozen=True, slots=True)
class DeletionSummary:
    """Folded view of a DeletionOutcome for the display layer.

    Attributes:
        succeeded_count: Number of deleted entries.
        failed_count: Number of entries that were not deleted.
        failures: Each failed entry with its reason.
        bytes_freed: Scan-time bytes of the deleted entries.
        dry_run: Whether the batch was simulated.
    """

    succeeded_count: int
    failed_count: int
    failures: tuple[DeletionFailure, ...]
    bytes_freed: int
    dry_run: bool = False

    @property
    def all_succeeded(self) -> bool:
        """Check if nothing failed."""
        return self.failed_count == 0

    @property
    def failures_by_kind(self) -> dict[ErrorKind, int]:
        """Count failures per error kind."""
        counts: dict[ErrorKind, int] = {}
        for failure in self.failures:
            counts[failure.error_kind] = counts.get(failure.error_kind, 0) + 1
        return counts
