"""Locations of the user's disk-cleaner files.

Scans keep no state between runs, so the only directory in use is the
XDG config directory: ``$XDG_CONFIG_HOME/disk-cleaner`` when the variable
is set and non-empty, ``~/.config/disk-cleaner`` otherwise.
"""

import os
from pathlib import Path

APP_NAME = "disk-cleaner"


def get_config_dir() -> Path:
    """Directory holding settings.toml and theme.toml (not created here)."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_NAME


def get_settings_path() -> Path:
    """Path of the user settings file."""
    return get_config_dir() / "settings.toml"


def get_user_theme_path() -> Path:
    """Path of the optional theme override file."""
    return get_config_dir() / "theme.toml"
