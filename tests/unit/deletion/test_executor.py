"""Unit tests for DeletionExecutor.

Tests deletion of directories, files and symlinks, dry-run mode,
and per-entry error handling.
"""

import errno
from pathlib import Path
from unittest.mock import patch

from diskcleaner.deletion.executor import DeletionExecutor, friendly_error_message
from diskcleaner.models.deletion import DeletionFailure, DeletionPlan, ErrorKind
from diskcleaner.models.entry import Entry, EntryKind


def _plan(*entries: Entry, rejected: tuple[DeletionFailure, ...] = ()) -> DeletionPlan:
    return DeletionPlan(validations=(), entries=entries, rejected=rejected)


def _file_entry(path: Path, size: int) -> Entry:
    return Entry(str(path), path.name, EntryKind.FILE, size)


def _dir_entry(path: Path, size: int) -> Entry:
    return Entry(str(path), path.name, EntryKind.DIRECTORY, size)


class TestDeletionExecutor:
    """Tests for DeletionExecutor."""

    def test_delete_file(self, tmp_path: Path) -> None:
        """Deleting a file uses Path.unlink."""
        target = tmp_path / "a.bin"
        target.write_bytes(b"x" * 1000)

        outcome = DeletionExecutor().execute(_plan(_file_entry(target, 1000)))

        assert outcome.succeeded == (str(target),)
        assert outcome.failed == ()
        assert outcome.bytes_freed == 1000
        assert not target.exists()

    def test_delete_directory(self, tmp_path: Path) -> None:
        """Deleting a directory removes the whole subtree."""
        target = tmp_path / "cache"
        (target / "nested").mkdir(parents=True)
        (target / "nested" / "f.txt").write_text("content")

        outcome = DeletionExecutor().execute(_plan(_dir_entry(target, 7)))

        assert outcome.succeeded == (str(target),)
        assert not target.exists()

    def test_delete_symlink_keeps_target(self, tmp_path: Path) -> None:
        """Deleting a symlinked directory removes the link, not the target."""
        real_dir = tmp_path / "real"
        real_dir.mkdir()
        (real_dir / "keep.txt").write_text("keep")
        link = tmp_path / "link"
        link.symlink_to(real_dir)

        outcome = DeletionExecutor().execute(_plan(_dir_entry(link, 4)))

        assert outcome.succeeded == (str(link),)
        assert not link.is_symlink()
        assert (real_dir / "keep.txt").exists()

    def test_dry_run_touches_nothing(self, tmp_path: Path) -> None:
        """Dry-run reports success without deleting."""
        target = tmp_path / "a.bin"
        target.write_bytes(b"x" * 10)

        executor = DeletionExecutor(dry_run=True)
        outcome = executor.execute(_plan(_file_entry(target, 10)))

        assert executor.dry_run is True
        assert outcome.dry_run is True
        assert outcome.succeeded == (str(target),)
        assert outcome.bytes_freed == 10
        assert target.exists()

    def test_failure_does_not_abort_batch(self, tmp_path: Path) -> None:
        """One failed deletion is recorded and the rest continue."""
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.write_bytes(b"1" * 5)
        second.write_bytes(b"2" * 7)
        real_unlink = Path.unlink

        def flaky_unlink(self: Path, missing_ok: bool = False) -> None:
            if self == first:
                raise PermissionError(errno.EACCES, "Permission denied", str(self))
            real_unlink(self, missing_ok=missing_ok)

        with patch.object(Path, "unlink", flaky_unlink):
            outcome = DeletionExecutor().execute(
                _plan(_file_entry(first, 5), _file_entry(second, 7))
            )

        assert outcome.succeeded == (str(second),)
        assert len(outcome.failed) == 1
        failure = outcome.failed[0]
        assert failure.path == str(first)
        assert failure.error_kind == ErrorKind.DELETION_FAILED
        assert failure.message is not None
        assert "Permission denied" in failure.message
        assert outcome.bytes_freed == 7
        assert first.exists()

    def test_rmtree_failure(self, tmp_path: Path) -> None:
        """A failing rmtree is reported as a deletion failure."""
        target = tmp_path / "dir"
        target.mkdir()
        error = OSError(errno.ENOTEMPTY, "Directory not empty")

        with patch("diskcleaner.deletion.executor.shutil.rmtree", side_effect=error):
            outcome = DeletionExecutor().execute(_plan(_dir_entry(target, 0)))

        assert outcome.succeeded == ()
        assert outcome.failed[0].message == "Directory is not empty and cannot be deleted."

    def test_outcome_partitions_selection(self, tmp_path: Path) -> None:
        """Every selected path ends up in exactly one of succeeded or failed."""
        present = tmp_path / "present"
        present.write_bytes(b"p")
        rejected = DeletionFailure(str(tmp_path / "gone"), ErrorKind.VANISHED_OR_CHANGED)
        missing = _file_entry(tmp_path / "raced", 3)

        outcome = DeletionExecutor().execute(
            _plan(_file_entry(present, 1), missing, rejected=(rejected,))
        )

        assert outcome.total == 3
        assert outcome.succeeded == (str(present),)
        assert {f.path for f in outcome.failed} == {rejected.path, missing.path}
        assert outcome.bytes_freed == 1


class TestFriendlyErrorMessage:
    """Tests for friendly_error_message."""

    def test_permission_denied(self) -> None:
        """Permission errors suggest elevated privileges."""
        assert "administrator" in friendly_error_message(PermissionError("denied"))

    def test_not_found(self) -> None:
        """Missing files have a short message."""
        assert friendly_error_message(FileNotFoundError()) == "File or directory not found."

    def test_other_errors(self) -> None:
        """Other errors include the original text."""
        message = friendly_error_message(OSError(errno.EIO, "I/O error"))

        assert message.startswith("Operation failed:")
        assert "I/O error" in message
