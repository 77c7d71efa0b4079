"""Unit tests for scan options."""

from pathlib import Path

import pytest
from diskcleaner.analysis.options import ScanOptions
from diskcleaner.core.errors import ConfigurationError, ConflictingFiltersError
from diskcleaner.core.settings import Settings
from diskcleaner.models.filters import KindFilter


class TestFromCli:
    """Tests for ScanOptions.from_cli."""

    def test_defaults(self) -> None:
        """Without flags or settings, defaults apply."""
        options = ScanOptions.from_cli(Path("."))

        assert options.enumeration_depth == 1
        assert options.min_size_bytes is None
        assert options.kind_filter is None
        assert options.concurrency_limit is None
        assert options.filter_spec.is_noop is True

    def test_flags_override_settings(self) -> None:
        """Explicit flags win over settings."""
        settings = Settings(default_depth=3, concurrency_limit=4, min_size_bytes=100)

        options = ScanOptions.from_cli(
            Path("."), depth=2, min_size=10, jobs=1, settings=settings
        )

        assert options.enumeration_depth == 2
        assert options.min_size_bytes == 10
        assert options.concurrency_limit == 1

    def test_settings_fill_missing_flags(self) -> None:
        """Settings provide values for flags that were not given."""
        settings = Settings(default_depth=3, concurrency_limit=4, min_size_bytes=100)

        options = ScanOptions.from_cli(Path("."), settings=settings)

        assert options.enumeration_depth == 3
        assert options.min_size_bytes == 100
        assert options.concurrency_limit == 4

    def test_kind_flag(self) -> None:
        """--files-only becomes a kind filter."""
        options = ScanOptions.from_cli(Path("."), files_only=True)

        assert options.kind_filter == KindFilter.FILES_ONLY

    def test_conflicting_filters(self) -> None:
        """Both kind flags are rejected."""
        with pytest.raises(ConflictingFiltersError):
            ScanOptions.from_cli(Path("."), dirs_only=True, files_only=True)

    @pytest.mark.parametrize(
        ("depth", "min_size", "jobs"),
        [(0, None, None), (None, -5, None), (None, None, 0)],
    )
    def test_out_of_range_values(
        self, depth: int | None, min_size: int | None, jobs: int | None
    ) -> None:
        """Out-of-range values become a ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid scan options"):
            ScanOptions.from_cli(Path("."), depth=depth, min_size=min_size, jobs=jobs)

    def test_options_are_frozen(self) -> None:
        """Options cannot be changed after validation."""
        options = ScanOptions.from_cli(Path("."))

        with pytest.raises(ValueError):
            options.enumeration_depth = 5  # type: ignore[misc]
