"""Exception hierarchy for disk-cleaner.

Only invocation-level problems are raised as exceptions. Per-entry
problems found while sizing or deleting are captured as
:class:`~diskcleaner.models.deletion.ErrorKind` values and reported
with the affected entry instead.
"""


class DiskCleanerError(Exception):
    """Base exception for all disk-cleaner errors."""


class InvalidRootError(DiskCleanerError):
    """Raised when the scan root does not exist or is not a directory."""

    def __init__(self, root: str, reason: str) -> None:
        self.root = root
        self.reason = reason
        super().__init__(reason)


class ConfigurationError(DiskCleanerError):
    """Raised when scan options are invalid before any work begins."""


class ConflictingFiltersError(ConfigurationError):
    """Raised when both the dirs-only and files-only filters are requested."""


class SettingsError(DiskCleanerError):
    """Base exception for settings file errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is required but does not exist."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""
