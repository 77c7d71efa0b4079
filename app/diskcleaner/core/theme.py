"""Color theme for disk-cleaner output.

Colors come from the bundled ``data/theme.toml``; any subset of them can
be overridden in ``~/.config/disk-cleaner/theme.toml``.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from diskcleaner.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

# Rich style name -> (color field, extra style attributes)
_STYLES: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "border": ("border", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "entry.directory": ("directory", "bold"),
    "entry.file": ("file", ""),
    "entry.size": ("size", ""),
    "entry.degraded": ("degraded", ""),
}


def _check_hex(name: str, value: object) -> str:
    """Return a stripped #RGB/#RRGGBB color or raise ValueError."""
    if not isinstance(value, str):
        msg = f"{name}: color must be a string"
        raise ValueError(msg)
    color = value.strip()
    if not color.startswith("#"):
        msg = f"{name}: color must start with '#'"
        raise ValueError(msg)
    digits = color[1:]
    if len(digits) not in (3, 6):
        msg = f"{name}: color must be #RGB or #RRGGBB format"
        raise ValueError(msg)
    if any(c not in "0123456789abcdefABCDEF" for c in digits):
        msg = f"{name}: invalid hex color '{color}'"
        raise ValueError(msg)
    return color


class ThemeColors(BaseModel):
    """Hex colors used by the tables and messages."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    directory: str = "#0e8ac8"
    file: str = "#ffffff"
    size: str = "#0ec1c8"
    degraded: str = "#f5b332"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Reject anything that is not a hex color."""
        return _check_hex(info.field_name, v)


def get_bundled_theme_path() -> Path:
    """Location of the theme shipped with the package."""
    return resources.files("diskcleaner.data").joinpath("theme.toml")  # type: ignore[return-value]


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are dropped. Returns None when the file is missing,
    unreadable or malformed.
    """
    try:
        data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring malformed theme file %s: %s", path, e)
        return None
    except OSError as e:
        logger.warning("Cannot read theme file %s: %s", path, e)
        return None

    section = data.get("colors", {})
    if not isinstance(section, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return None
    return {key: value for key, value in section.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge user overrides over the bundled colors.

    An invalid user color discards the whole merge in favour of the
    built-in defaults.
    """
    colors = _load_toml_colors(get_bundled_theme_path())
    if colors is None:
        logger.error("Bundled theme is missing or unreadable; using built-in colors")
        colors = {}

    overrides = _load_toml_colors(get_user_theme_path())
    if overrides:
        logger.debug("Applying %d theme override(s)", len(overrides))
        colors = {**colors, **overrides}

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme configuration, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for a set of colors (loaded if not given)."""
    colors = colors or load_theme()
    styles: dict[str, str] = {}
    for style, (field, attributes) in _STYLES.items():
        color = getattr(colors, field)
        styles[style] = f"{attributes} {color}".strip()
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Rich theme shared by the module-level consoles, built once."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
