"""Traversal enumerator.

Lists the entries that will be reported as rows for a scan root,
descending a configurable number of levels. No sizes are computed here.
"""

import logging
import os
import stat
from collections import deque
from dataclasses import dataclass
from pathlib import Path

from diskcleaner.core.errors import ConfigurationError, InvalidRootError
from diskcleaner.models.entry import EntryKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EnumeratedNode:
    """A filesystem node selected for reporting, before sizing.

    Attributes:
        path: Absolute filesystem path.
        display_name: Path relative to the scan root, in POSIX form.
        kind: File or directory (symlinks resolved).
    """

    path: str
    display_name: str
    kind: EntryKind


@dataclass(frozen=True, slots=True)
class Enumeration:
    """Nodes found under a scan root.

    Attributes:
        root: Absolute path of the scan root.
        nodes: Enumerated nodes, ordered by path.
        warnings: Number of directories that could not be listed.
    """

    root: str
    nodes: tuple[EnumeratedNode, ...]
    warnings: int


def resolve_root(root: str | Path) -> Path:
    """Resolve and validate a scan root.

    Args:
        root: Directory to scan.

    Returns:
        Absolute, resolved path of the root.

    Raises:
        InvalidRootError: If the root does not exist, cannot be accessed or
            is not a directory.
    """
    path = Path(root).expanduser()
    try:
        mode = path.stat().st_mode
    except FileNotFoundError as e:
        raise InvalidRootError(str(root), f"Directory '{root}' does not exist") from e
    except OSError as e:
        raise InvalidRootError(str(root), f"Cannot access '{root}': {e}") from e
    if not stat.S_ISDIR(mode):
        raise InvalidRootError(str(root), f"'{root}' is not a directory")
    return path.resolve()


def enumerate_entries(root: str | Path, enumeration_depth: int = 1) -> Enumeration:
    """Enumerate the reportable nodes beneath a root.

    Directories shallower than ``enumeration_depth`` are expanded into
    their children. Every node that is not expanded (a file at any level,
    or a directory at exactly ``enumeration_depth``) becomes a row, so
    rows never contain one another.

    Symbolic links are followed; a dangling link is reported as a file.
    Directories that cannot be listed, and children whose metadata cannot
    be read (e.g. inside a directory without search permission), are
    skipped and counted as warnings.

    Args:
        root: Directory to enumerate.
        enumeration_depth: Number of levels to descend (1 = immediate children).

    Returns:
        Enumeration with nodes sorted by path.

    Raises:
        InvalidRootError: If the root is missing, unreadable or not a directory.
        ConfigurationError: If enumeration_depth is less than 1.
    """
    if enumeration_depth < 1:
        msg = f"Enumeration depth must be at least 1, got {enumeration_depth}"
        raise ConfigurationError(msg)

    root_path = resolve_root(root)
    nodes: list[EnumeratedNode] = []
    warnings = 0

    pending: deque[tuple[Path, int]] = deque([(root_path, 0)])
    while pending:
        directory, level = pending.popleft()
        try:
            children = sorted(directory.iterdir())
        except OSError as e:
            if directory == root_path:
                raise InvalidRootError(str(root), f"Cannot read '{root}': {e}") from e
            logger.warning("Cannot list directory %s: %s", directory, e)
            warnings += 1
            continue

        for child in children:
            try:
                is_dir = stat.S_ISDIR(child.stat().st_mode)
            except FileNotFoundError as e:
                if not os.path.islink(child):
                    logger.warning("Entry vanished during listing: %s", child)
                    warnings += 1
                    continue
                # Dangling symlink: reported as a file, sized as degraded
                logger.debug("Dangling symlink %s: %s", child, e)
                is_dir = False
            except OSError as e:
                logger.warning("Cannot access %s: %s", child, e)
                warnings += 1
                continue

            if is_dir and level + 1 < enumeration_depth:
                pending.append((child, level + 1))
                continue

            nodes.append(
                EnumeratedNode(
                    path=str(child),
                    display_name=child.relative_to(root_path).as_posix(),
                    kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
                )
            )

    nodes.sort(key=lambda n: n.path)
    logger.debug(
        "Enumerated %d node(s) under %s at depth %d (%d warning(s))",
        len(nodes),
        root_path,
        enumeration_depth,
        warnings,
    )
    return Enumeration(root=str(root_path), nodes=tuple(nodes), warnings=warnings)
