"""Guarded deletion module.

This module provides pre-deletion validation, best-effort batch
deletion, and folding of the outcome into a summary.
"""

from diskcleaner.deletion.executor import DeletionExecutor, friendly_error_message
from diskcleaner.deletion.reporter import summarize
from diskcleaner.deletion.validator import validate_entry, validate_selection

__all__ = [
    "DeletionExecutor",
    "friendly_error_message",
    "summarize",
    "validate_entry",
    "validate_selection",
]
