"""Entry models for directory analysis.

This module defines the immutable data structures produced by a scan:
individual size-annotated entries and the analysis result that groups
them together with the scan totals.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    """Kind of a reported filesystem entry.

    Symbolic links are followed, so a link is reported with the kind of
    its target.

    Attributes:
        FILE: Anything that is not a directory.
        DIRECTORY: Directory (or a symlink resolving to one).
    """

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class Entry:
    """A single reported filesystem node with its aggregate size.

    Attributes:
        path: Absolute filesystem path.
        display_name: Path relative to the scan root, in POSIX form.
        kind: Whether the entry is a file or a directory.
        size_bytes: File size, or recursive sum of all descendant files.
        degraded: True if part of the subtree could not be read, in which
            case size_bytes is a lower bound.
    """

    path: str
    display_name: str
    kind: EntryKind
    size_bytes: int
    degraded: bool = False

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"Size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        """Check if this entry is a directory."""
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        """Check if this entry is a file."""
        return self.kind == EntryKind.FILE


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Ordered, immutable result of one scan invocation.

    Attributes:
        root: Absolute path of the scanned directory.
        entries: Reported entries, in presentation order.
        total_size_bytes: Sum of size_bytes over the reported entries.
        warnings: Number of directories skipped during enumeration
            because they could not be read.
    """

    root: str
    entries: tuple[Entry, ...]
    total_size_bytes: int
    warnings: int = 0

    @classmethod
    def from_entries(
        cls,
        root: str,
        entries: Iterable[Entry],
        warnings: int = 0,
    ) -> "AnalysisResult":
        """Build a result, computing the total from the given entries.

        Args:
            root: Absolute path of the scanned directory.
            entries: Entries in presentation order.
            warnings: Enumeration warning count.

        Returns:
            New AnalysisResult.
        """
        frozen = tuple(entries)
        return cls(
            root=root,
            entries=frozen,
            total_size_bytes=sum(e.size_bytes for e in frozen),
            warnings=warnings,
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    @property
    def is_empty(self) -> bool:
        """Check if the result has no entries."""
        return not self.entries

    @property
    def degraded_count(self) -> int:
        """Number of entries whose size is only a lower bound."""
        return sum(1 for e in self.entries if e.degraded)

    def get(self, path: str) -> Entry | None:
        """Look up an entry by its path.

        Args:
            path: Absolute path of the entry.

        Returns:
            The matching entry, or None if the path was not reported.
        """
        for entry in self.entries:
            if entry.path == path:
                return entry
        return None
