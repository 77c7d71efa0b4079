"""Scan options.

Validated, invocation-level parameters for one scan. Built from command
line flags with user settings as fallbacks; all checks happen here, before
any filesystem work begins.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from diskcleaner.core.errors import ConfigurationError
from diskcleaner.core.settings import Settings
from diskcleaner.models.filters import FilterSpec, KindFilter


def _format_validation_error(error: ValidationError) -> str:
    """Render a pydantic ValidationError as a single line."""
    parts: list[str] = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"])
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


class ScanOptions(BaseModel):
    """Parameters for a single scan.

    Attributes:
        root: Directory to analyze.
        enumeration_depth: Levels flattened into report rows (1 = immediate children).
        min_size_bytes: Only keep entries at least this large.
        kind_filter: Only keep directories or only keep files.
        concurrency_limit: Sizing workers (None = processor count).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path
    enumeration_depth: Annotated[
        int,
        Field(ge=1, description="Levels flattened into report rows"),
    ] = 1
    min_size_bytes: Annotated[
        int | None,
        Field(ge=0, description="Minimum entry size in bytes"),
    ] = None
    kind_filter: Annotated[
        KindFilter | None,
        Field(description="Restrict results to one entry kind"),
    ] = None
    concurrency_limit: Annotated[
        int | None,
        Field(ge=1, description="Maximum concurrent sizing tasks"),
    ] = None

    @property
    def filter_spec(self) -> FilterSpec:
        """Filter stage specification for these options."""
        return FilterSpec(min_size_bytes=self.min_size_bytes, kind_filter=self.kind_filter)

    @classmethod
    def from_cli(
        cls,
        root: Path,
        *,
        depth: int | None = None,
        min_size: int | None = None,
        dirs_only: bool = False,
        files_only: bool = False,
        jobs: int | None = None,
        settings: Settings | None = None,
    ) -> "ScanOptions":
        """Build options from command-line flags.

        Flags that were not given fall back to the user's settings.

        Args:
            root: Directory to analyze.
            depth: Enumeration depth flag.
            min_size: Minimum size flag in bytes.
            dirs_only: Keep directories only.
            files_only: Keep files only.
            jobs: Concurrency limit flag.
            settings: User settings providing defaults.

        Returns:
            Validated ScanOptions.

        Raises:
            ConflictingFiltersError: If both dirs_only and files_only are set.
            ConfigurationError: If any value is out of range.
        """
        settings = settings or Settings()
        spec = FilterSpec.from_flags(dirs_only=dirs_only, files_only=files_only)

        try:
            return cls(
                root=root,
                enumeration_depth=depth if depth is not None else settings.default_depth,
                min_size_bytes=min_size if min_size is not None else settings.min_size_bytes,
                kind_filter=spec.kind_filter,
                concurrency_limit=jobs if jobs is not None else settings.concurrency_limit,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid scan options: {_format_validation_error(e)}") from e
