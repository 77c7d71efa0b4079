"""disk-cleaner - Interactive directory size analyzer and cleanup tool.

Scans a directory tree, reports the aggregate size of each entry and
removes an operator-selected subset with validation before deletion.
"""

__version__ = "0.1.0"
