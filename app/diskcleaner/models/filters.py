"""Filter specification for analysis results."""

from dataclasses import dataclass
from enum import Enum

from diskcleaner.core.errors import ConflictingFiltersError
from diskcleaner.models.entry import Entry, EntryKind


class KindFilter(str, Enum):
    """Restrict results to one kind of entry.

    Attributes:
        DIRS_ONLY: Keep directories only.
        FILES_ONLY: Keep files only.
    """

    DIRS_ONLY = "dirs_only"
    FILES_ONLY = "files_only"

    @property
    def kind(self) -> EntryKind:
        """The entry kind this filter keeps."""
        if self == KindFilter.DIRS_ONLY:
            return EntryKind.DIRECTORY
        return EntryKind.FILE


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Conjunctive filter over analysis entries.

    Attributes:
        min_size_bytes: Keep entries with at least this many bytes (None = no threshold).
        kind_filter: Keep only one kind of entry (None = keep both).
    """

    min_size_bytes: int | None = None
    kind_filter: KindFilter | None = None

    def __post_init__(self) -> None:
        """Validate filter data after initialization."""
        if self.min_size_bytes is not None and self.min_size_bytes < 0:
            msg = f"Minimum size cannot be negative, got {self.min_size_bytes}"
            raise ValueError(msg)

    @classmethod
    def from_flags(
        cls,
        *,
        dirs_only: bool = False,
        files_only: bool = False,
        min_size_bytes: int | None = None,
    ) -> "FilterSpec":
        """Create a FilterSpec from command-line style flags.

        Args:
            dirs_only: Keep directories only.
            files_only: Keep files only.
            min_size_bytes: Optional minimum size threshold.

        Returns:
            FilterSpec for the given flags.

        Raises:
            ConflictingFiltersError: If both dirs_only and files_only are set.
        """
        if dirs_only and files_only:
            msg = "--dirs-only and --files-only cannot be used together"
            raise ConflictingFiltersError(msg)

        kind_filter: KindFilter | None = None
        if dirs_only:
            kind_filter = KindFilter.DIRS_ONLY
        elif files_only:
            kind_filter = KindFilter.FILES_ONLY

        return cls(min_size_bytes=min_size_bytes, kind_filter=kind_filter)

    @property
    def is_noop(self) -> bool:
        """Check if this filter keeps every entry."""
        return self.min_size_bytes is None and self.kind_filter is None

    def accepts(self, entry: Entry) -> bool:
        """Check whether an entry passes both the size and kind filters."""
        if self.min_size_bytes is not None and entry.size_bytes < self.min_size_bytes:
            return False
        if self.kind_filter is not None and entry.kind != self.kind_filter.kind:
            return False
        return True
