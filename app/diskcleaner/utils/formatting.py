"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console

from diskcleaner.core.theme import get_theme

_DECIMAL_UNITS: tuple[str, ...] = ("kB", "MB", "GB", "TB", "PB")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int) -> str:
    """Format a byte count with decimal (SI) units.

    Examples: 512 -> "512 B", 1000 -> "1 kB", 1024 -> "1.02 kB".

    Args:
        size_bytes: Number of bytes.

    Returns:
        Human-readable size string.
    """
    if size_bytes < 1000:
        return f"{size_bytes} B"

    size = float(size_bytes)
    unit = "B"
    for unit in _DECIMAL_UNITS:
        size /= 1000
        if size < 1000:
            break
    number = f"{size:.2f}".rstrip("0").rstrip(".")
    return f"{number} {unit}"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
