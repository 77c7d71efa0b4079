"""Data models for disk-cleaner.

This module exports the core data structures used throughout the application.
"""

from diskcleaner.models.deletion import (
    DeletionFailure,
    DeletionOutcome,
    DeletionPlan,
    DeletionSummary,
    ErrorKind,
    ValidationResult,
)
from diskcleaner.models.entry import AnalysisResult, Entry, EntryKind
from diskcleaner.models.filters import FilterSpec, KindFilter

__all__ = [
    "AnalysisResult",
    "DeletionFailure",
    "DeletionOutcome",
    "DeletionPlan",
    "DeletionSummary",
    "Entry",
    "EntryKind",
    "ErrorKind",
    "FilterSpec",
    "KindFilter",
    "ValidationResult",
]
