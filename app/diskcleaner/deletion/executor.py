"""Deletion executor.

Removes validated entries one by one. Each entry is independent: a
failure is recorded and the batch continues. Nothing is rolled back.
"""

import errno
import logging
import shutil
from pathlib import Path

from diskcleaner.models.deletion import (
    DeletionFailure,
    DeletionOutcome,
    DeletionPlan,
    ErrorKind,
)
from diskcleaner.models.entry import Entry

logger = logging.getLogger(__name__)


def friendly_error_message(error: OSError) -> str:
    """Translate common deletion errors into a short user-facing message.

    Args:
        error: The error raised by the removal call.

    Returns:
        Human-readable description of the failure.
    """
    if isinstance(error, PermissionError):
        return "Permission denied. You may need administrator privileges."
    if isinstance(error, FileNotFoundError):
        return "File or directory not found."
    if error.errno == errno.ENOTEMPTY:
        return "Directory is not empty and cannot be deleted."
    return f"Operation failed: {error}"


class DeletionExecutor:
    """Executes a validated deletion plan.

    Supports dry-run mode, in which every validated entry is reported as
    succeeded without touching the filesystem.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the DeletionExecutor.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether deletions are simulated."""
        return self._dry_run

    def execute(self, plan: DeletionPlan) -> DeletionOutcome:
        """Delete every entry in the plan and collect the outcome.

        Entries rejected during validation are carried into ``failed``
        first, so the outcome covers the whole original selection.

        Args:
            plan: Validated deletion plan.

        Returns:
            DeletionOutcome partitioning the selection into succeeded and failed.
        """
        succeeded: list[str] = []
        failed: list[DeletionFailure] = list(plan.rejected)
        bytes_freed = 0

        for entry in plan.entries:
            failure = self._delete_single(entry)
            if failure is None:
                succeeded.append(entry.path)
                bytes_freed += entry.size_bytes
            else:
                failed.append(failure)

        return DeletionOutcome(
            succeeded=tuple(succeeded),
            failed=tuple(failed),
            bytes_freed=bytes_freed,
            dry_run=self._dry_run,
        )

    def _delete_single(self, entry: Entry) -> DeletionFailure | None:
        """Delete a single entry.

        Dispatches on the recorded kind:
        - Symlinks: Path.unlink (the link is removed, never its target)
        - Directories: shutil.rmtree
        - Files: Path.unlink

        Args:
            entry: Validated entry to delete.

        Returns:
            None on success, otherwise the failure record.
        """
        if self._dry_run:
            logger.info("Dry-run: would delete %s", entry.path)
            return None

        target = Path(entry.path)
        try:
            if target.is_symlink() or not entry.is_directory:
                target.unlink()
            else:
                shutil.rmtree(target)
        except OSError as e:
            logger.warning("Failed to delete %s: %s", entry.path, e)
            return DeletionFailure(
                path=entry.path,
                error_kind=ErrorKind.DELETION_FAILED,
                message=friendly_error_message(e),
            )

        logger.info("Deleted %s", entry.path)
        return None
