"""Directory analysis orchestration.

Runs the scan stages in order: enumerate the reportable nodes, size them
concurrently, then sort (and optionally filter) the result.
"""

import logging
from pathlib import Path

from diskcleaner.analysis.aggregator import SizeAggregator
from diskcleaner.analysis.enumerator import enumerate_entries
from diskcleaner.analysis.filtering import apply_filter, sort_entries
from diskcleaner.analysis.options import ScanOptions
from diskcleaner.core.errors import ConfigurationError
from diskcleaner.models.entry import AnalysisResult

logger = logging.getLogger(__name__)


class DiskAnalyzer:
    """Produces size-annotated analysis results for a directory.

    Enumeration depth decides which nodes become rows; sizing always
    recurses through the whole subtree of each row.

    Args:
        enumeration_depth: Levels flattened into rows (1 = immediate children).
        concurrency_limit: Sizing workers (None = processor count).
    """

    def __init__(
        self,
        enumeration_depth: int = 1,
        concurrency_limit: int | None = None,
    ) -> None:
        if enumeration_depth < 1:
            msg = f"Enumeration depth must be at least 1, got {enumeration_depth}"
            raise ConfigurationError(msg)
        self._enumeration_depth = enumeration_depth
        self._aggregator = SizeAggregator(concurrency_limit)

    @property
    def enumeration_depth(self) -> int:
        """Levels flattened into report rows."""
        return self._enumeration_depth

    @property
    def concurrency_limit(self) -> int:
        """Effective number of sizing workers."""
        return self._aggregator.concurrency_limit

    def analyze(self, root: str | Path) -> AnalysisResult:
        """Scan a directory and return its entries sorted by size.

        Args:
            root: Directory to analyze.

        Returns:
            AnalysisResult sorted by size descending, then name.

        Raises:
            InvalidRootError: If root does not exist or is not a directory.
        """
        logger.debug("Analyzing %s (depth=%d)", root, self._enumeration_depth)
        enumeration = enumerate_entries(root, self._enumeration_depth)
        entries = self._aggregator.aggregate(enumeration.nodes)
        result = AnalysisResult.from_entries(
            root=enumeration.root,
            entries=sort_entries(entries),
            warnings=enumeration.warnings,
        )
        logger.debug(
            "Analysis of %s complete: %d entries, %d bytes, %d degraded",
            result.root,
            len(result),
            result.total_size_bytes,
            result.degraded_count,
        )
        return result


def run_scan(options: ScanOptions) -> AnalysisResult:
    """Run a full scan for validated options, applying their filters.

    Args:
        options: Validated scan options.

    Returns:
        Filtered and sorted AnalysisResult.

    Raises:
        InvalidRootError: If the root does not exist or is not a directory.
    """
    analyzer = DiskAnalyzer(
        enumeration_depth=options.enumeration_depth,
        concurrency_limit=options.concurrency_limit,
    )
    result = analyzer.analyze(options.root)

    spec = options.filter_spec
    if spec.is_noop:
        return result
    return apply_filter(result, spec)
