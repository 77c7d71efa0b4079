"""CLI commands for disk-cleaner.

This package contains all subcommand implementations.
"""

from diskcleaner.cli.commands import clean, config, scan

__all__ = ["clean", "config", "scan"]
