"""CLI package for disk-cleaner.

This package contains the Typer application and all subcommands.
"""

from diskcleaner.cli.main import app

__all__ = ["app"]
