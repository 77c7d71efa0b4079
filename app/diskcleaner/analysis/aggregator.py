"""Concurrent size aggregation.

Computes the recursive size of every enumerated node on a single bounded
thread pool. Subdirectories are not recursed into on the call stack:
each directory listing is one task, and the subdirectories it discovers
are queued as further tasks for the same node. The coordinating thread
owns one accumulator per node and is the only writer to it.
"""

import logging
import os
from collections import deque
from collections.abc import Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass

from diskcleaner.analysis.enumerator import EnumeratedNode
from diskcleaner.core.errors import ConfigurationError
from diskcleaner.models.entry import Entry, EntryKind

logger = logging.getLogger(__name__)


def default_concurrency() -> int:
    """Number of workers to use when no limit is configured.

    Returns:
        The number of processors available to this process (at least 1).
    """
    if hasattr(os, "sched_getaffinity"):
        return max(1, len(os.sched_getaffinity(0)))
    return os.cpu_count() or 1


@dataclass(frozen=True, slots=True)
class _Listing:
    """Result of one sizing task.

    Attributes:
        size_bytes: Bytes of the regular files seen by this task.
        subdirectories: Directories discovered that still need listing.
        degraded: True if something could not be read.
    """

    size_bytes: int
    subdirectories: tuple[str, ...] = ()
    degraded: bool = False


@dataclass(slots=True)
class _Accumulator:
    """Running totals for one node, owned by the coordinating thread."""

    size_bytes: int = 0
    degraded: bool = False
    tasks: int = 0


def _measure_file(path: str) -> _Listing:
    """Size a single file node (symlinks followed)."""
    try:
        return _Listing(size_bytes=os.stat(path).st_size)
    except OSError as e:
        logger.warning("Cannot access %s: %s", path, e)
        return _Listing(size_bytes=0, degraded=True)


def _list_directory(path: str) -> _Listing:
    """List one directory, summing its files and collecting its subdirectories.

    A failure on a single child only drops that child; a failure to open
    the directory drops the whole branch. Both mark the listing degraded.
    """
    size = 0
    subdirectories: list[str] = []
    degraded = False

    try:
        with os.scandir(path) as it:
            for child in it:
                try:
                    if child.is_dir():
                        subdirectories.append(child.path)
                    else:
                        size += child.stat().st_size
                except OSError as e:
                    logger.warning("Cannot access %s: %s", child.path, e)
                    degraded = True
    except OSError as e:
        logger.warning("Cannot list directory %s: %s", path, e)
        degraded = True

    return _Listing(
        size_bytes=size,
        subdirectories=tuple(subdirectories),
        degraded=degraded,
    )


class SizeAggregator:
    """Computes recursive sizes for enumerated nodes on a bounded pool.

    At most ``concurrency_limit`` listing tasks are in flight at any time,
    which caps the number of simultaneously open directory handles. The
    remaining work waits in an explicit queue of pending directories.

    Attributes:
        concurrency_limit: Maximum number of concurrent sizing tasks.
    """

    def __init__(self, concurrency_limit: int | None = None) -> None:
        """Initialize the SizeAggregator.

        Args:
            concurrency_limit: Worker count. Defaults to the number of
                available processors.

        Raises:
            ConfigurationError: If concurrency_limit is less than 1.
        """
        limit = default_concurrency() if concurrency_limit is None else concurrency_limit
        if limit < 1:
            msg = f"Concurrency limit must be at least 1, got {limit}"
            raise ConfigurationError(msg)
        self.concurrency_limit = limit

    def aggregate(self, nodes: Sequence[EnumeratedNode]) -> list[Entry]:
        """Compute an Entry for every node.

        Blocks until every node and its full subtree have been accounted
        for. If interrupted, queued tasks are cancelled and the exception
        propagates; nothing is returned for a partial scan.

        Args:
            nodes: Nodes to size.

        Returns:
            One Entry per node, in the same order as ``nodes``.
        """
        accumulators = [_Accumulator() for _ in nodes]
        pending: deque[tuple[int, str, EntryKind]] = deque(
            (index, node.path, node.kind) for index, node in enumerate(nodes)
        )

        pool = ThreadPoolExecutor(
            max_workers=self.concurrency_limit,
            thread_name_prefix="diskcleaner-size",
        )
        in_flight: dict[Future[_Listing], int] = {}

        try:
            while pending or in_flight:
                # Only hand the pool as many tasks as it has workers
                while pending and len(in_flight) < self.concurrency_limit:
                    index, path, kind = pending.popleft()
                    task = _measure_file if kind == EntryKind.FILE else _list_directory
                    in_flight[pool.submit(task, path)] = index

                done, _ = wait(in_flight, return_when=FIRST_COMPLETED)
                for future in done:
                    index = in_flight.pop(future)
                    listing = future.result()
                    accumulator = accumulators[index]
                    accumulator.size_bytes += listing.size_bytes
                    accumulator.degraded = accumulator.degraded or listing.degraded
                    accumulator.tasks += 1
                    pending.extend(
                        (index, subdirectory, EntryKind.DIRECTORY)
                        for subdirectory in listing.subdirectories
                    )
        except BaseException:
            pool.shutdown(wait=False, cancel_futures=True)
            raise
        pool.shutdown(wait=True)

        logger.debug(
            "Sized %d node(s) with %d task(s) on %d worker(s)",
            len(nodes),
            sum(a.tasks for a in accumulators),
            self.concurrency_limit,
        )

        return [
            Entry(
                path=node.path,
                display_name=node.display_name,
                kind=node.kind,
                size_bytes=accumulator.size_bytes,
                degraded=accumulator.degraded,
            )
            for node, accumulator in zip(nodes, accumulators, strict=True)
        ]
