"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import diskcleaner.core.theme as theme_module
import pytest
from diskcleaner.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.header == "#69B9A1"
        assert colors.degraded == "#f5b332"

    def test_accepts_short_hex(self) -> None:
        """ThemeColors accepts #RGB codes."""
        assert ThemeColors(size="#abc").size == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(directory="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(file="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(package_manual="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from a valid TOML file, ignoring non-string values."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\nsize = 3\n')

        assert _load_toml_colors(theme_file) == {"text": "#000000"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when the file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None

    def test_returns_none_for_non_table_colors(self, tmp_path: Path) -> None:
        """Returns None when colors is not a table."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')

        assert _load_toml_colors(theme_file) is None


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_is_shipped(self) -> None:
        """The bundled theme file is part of the package data."""
        assert Path(get_bundled_theme_path()).is_file()

    def test_loads_bundled_theme(self) -> None:
        """Without user overrides the bundled colors are used."""
        colors = load_theme()

        assert colors == ThemeColors()

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled values key by key."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ndirectory = "#ff0000"\n')

        with patch("diskcleaner.core.theme.get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.directory == "#ff0000"
        assert colors.file == "#ffffff"

    def test_invalid_user_color_falls_back_to_defaults(self, tmp_path: Path) -> None:
        """An invalid color value makes the whole theme fall back to defaults."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nheader = "green"\n')

        with patch("diskcleaner.core.theme.get_user_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme and get_theme."""

    def test_includes_entry_styles(self) -> None:
        """Theme defines the styles used by the entry tables."""
        theme = get_rich_theme(ThemeColors())

        for name in ("entry.directory", "entry.file", "entry.size", "entry.degraded"):
            assert name in theme.styles
        assert "bold_header" in theme.styles
        assert "dim" in theme.styles

    def test_get_theme_is_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        with patch.object(theme_module, "_cached_theme", None):
            first = get_theme()
            second = get_theme()

        assert isinstance(first, Theme)
        assert first is second
