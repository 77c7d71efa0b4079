"""Unit tests for entry models."""

import pytest
from diskcleaner.models.entry import AnalysisResult, Entry, EntryKind


def _entry(name: str, size: int, kind: EntryKind = EntryKind.FILE, degraded: bool = False) -> Entry:
    return Entry(
        path=f"/data/{name}",
        display_name=name,
        kind=kind,
        size_bytes=size,
        degraded=degraded,
    )


class TestEntry:
    """Tests for the Entry dataclass."""

    def test_create_file_entry(self) -> None:
        """A file entry exposes its kind helpers."""
        entry = _entry("a.txt", 10)

        assert entry.is_file is True
        assert entry.is_directory is False
        assert entry.degraded is False

    def test_create_directory_entry(self) -> None:
        """A directory entry exposes its kind helpers."""
        entry = _entry("cache", 0, EntryKind.DIRECTORY)

        assert entry.is_directory is True
        assert entry.is_file is False

    def test_empty_path_rejected(self) -> None:
        """Entries must have a path."""
        with pytest.raises(ValueError, match="Path cannot be empty"):
            Entry(path="", display_name="x", kind=EntryKind.FILE, size_bytes=0)

    def test_negative_size_rejected(self) -> None:
        """Sizes cannot be negative."""
        with pytest.raises(ValueError, match="cannot be negative"):
            _entry("a", -1)

    def test_is_immutable(self) -> None:
        """Entries are frozen."""
        entry = _entry("a", 1)

        with pytest.raises(AttributeError):
            entry.size_bytes = 2  # type: ignore[misc]

    def test_kind_values(self) -> None:
        """EntryKind serializes to lowercase strings."""
        assert EntryKind.FILE.value == "file"
        assert EntryKind.DIRECTORY.value == "directory"


class TestAnalysisResult:
    """Tests for the AnalysisResult dataclass."""

    def test_from_entries_computes_total(self) -> None:
        """from_entries sums the entry sizes."""
        result = AnalysisResult.from_entries("/data", [_entry("a", 1000), _entry("b", 2000)])

        assert result.total_size_bytes == 3000
        assert len(result) == 2
        assert result.warnings == 0

    def test_empty_result(self) -> None:
        """An empty result has no entries and zero total."""
        result = AnalysisResult.from_entries("/data", [])

        assert result.is_empty is True
        assert result.total_size_bytes == 0

    def test_iteration_preserves_order(self) -> None:
        """Iteration yields the entries in presentation order."""
        entries = [_entry("b", 2), _entry("a", 1)]
        result = AnalysisResult.from_entries("/data", entries)

        assert [e.display_name for e in result] == ["b", "a"]

    def test_degraded_count(self) -> None:
        """degraded_count counts lower-bound entries."""
        result = AnalysisResult.from_entries(
            "/data",
            [_entry("a", 1, degraded=True), _entry("b", 2), _entry("c", 3, degraded=True)],
        )

        assert result.degraded_count == 2

    def test_get_by_path(self) -> None:
        """get finds an entry by its absolute path."""
        result = AnalysisResult.from_entries("/data", [_entry("a", 1)])

        assert result.get("/data/a") is not None
        assert result.get("/data/missing") is None
