"""Result reporter: folds a deletion outcome into a summary."""

from diskcleaner.models.deletion import DeletionOutcome, DeletionSummary


def summarize(outcome: DeletionOutcome) -> DeletionSummary:
    """Fold a DeletionOutcome into counts, failure reasons and bytes freed.

    Args:
        outcome: Outcome of a deletion batch.

    Returns:
        DeletionSummary for the display layer.
    """
    return DeletionSummary(
        succeeded_count=len(outcome.succeeded),
        failed_count=len(outcome.failed),
        failures=outcome.failed,
        bytes_freed=outcome.bytes_freed,
        dry_run=outcome.dry_run,
    )
