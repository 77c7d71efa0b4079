"""User settings.

Optional defaults for the scan and clean commands, stored in
~/.config/disk-cleaner/settings.toml. Command-line flags always win over
values from this file.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from diskcleaner.core.errors import SettingsError, SettingsNotFoundError, SettingsParseError
from diskcleaner.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Persistent defaults for disk-cleaner.

    Attributes:
        default_depth: Enumeration depth used when --depth is not given.
        concurrency_limit: Sizing workers used when --jobs is not given
            (None = processor count).
        min_size_bytes: Minimum size used when --min-size is not given.
        dry_run: Simulate deletions unless --dry-run is explicitly disabled.
    """

    model_config = ConfigDict(extra="forbid")

    default_depth: Annotated[
        int,
        Field(ge=1, description="Default enumeration depth"),
    ] = 1
    concurrency_limit: Annotated[
        int | None,
        Field(ge=1, description="Default number of sizing workers"),
    ] = None
    min_size_bytes: Annotated[
        int | None,
        Field(ge=0, description="Default minimum entry size in bytes"),
    ] = None
    dry_run: Annotated[
        bool,
        Field(description="Simulate deletions by default"),
    ] = False


def load_settings(path: Path | None = None, *, missing_ok: bool = True) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default settings path.
        missing_ok: Return default settings when the file does not exist.

    Returns:
        Validated Settings object.

    Raises:
        SettingsNotFoundError: If the file is missing and missing_ok is False.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        if missing_ok:
            logger.debug("No settings file at %s, using defaults", settings_path)
            return Settings()
        raise SettingsNotFoundError(f"Settings file not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    Unset optional values are omitted, since TOML has no null.

    Args:
        settings: Settings to write.
        path: Target path. If None, uses the default settings path.

    Returns:
        Path the settings were written to.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    data = settings.model_dump(exclude_none=True)

    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with open(settings_path, "wb") as f:
            tomli_w.dump(data, f)
    except OSError as e:
        raise SettingsError(f"Failed to write settings: {e}") from e

    logger.debug("Saved settings to %s", settings_path)
    return settings_path
