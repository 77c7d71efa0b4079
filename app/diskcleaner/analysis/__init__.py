"""Directory analysis module.

This module provides enumeration of reportable entries, concurrent
recursive sizing, and the filter/sort stage.
"""

from diskcleaner.analysis.aggregator import SizeAggregator, default_concurrency
from diskcleaner.analysis.analyzer import DiskAnalyzer, run_scan
from diskcleaner.analysis.enumerator import (
    EnumeratedNode,
    Enumeration,
    enumerate_entries,
    resolve_root,
)
from diskcleaner.analysis.filtering import apply_filter, sort_entries
from diskcleaner.analysis.options import ScanOptions

__all__ = [
    "DiskAnalyzer",
    "EnumeratedNode",
    "Enumeration",
    "ScanOptions",
    "SizeAggregator",
    "apply_filter",
    "default_concurrency",
    "enumerate_entries",
    "resolve_root",
    "run_scan",
    "sort_entries",
]
