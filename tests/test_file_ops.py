"""
Tests for the file operations module.
"""

import os
import pytest
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from filehandling.file_ops import (
    FileInfo,
    FileOperator,
    file_exists,
    directory_exists,
    create_directory,
    read_file,
    write_file,
    append_file,
    delete_file,
    remove_directory,
    get_file_info,
    list_directory,
)
from filehandling.logger import AuditLogger, ActionType, ActionStatus
from filehandling.settings import Settings


class TestExistence:
    """Test existence predicates."""

    def test_missing_path(self, tmp_path):
        """Missing paths are neither files nor directories."""
        missing = tmp_path / "nope"

        assert not file_exists(missing)
        assert not directory_exists(missing)

    def test_file_is_not_directory(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("x")

        assert file_exists(path)
        assert not directory_exists(path)

    def test_directory_is_not_file(self, tmp_path):
        assert directory_exists(tmp_path)
        assert not file_exists(tmp_path)

    def test_invalid_path_does_not_raise(self):
        """Lookup errors count as 'does not exist'."""
        assert not file_exists("bad\x00path")
        assert not directory_exists("bad\x00path")
        assert not file_exists("")


class TestCreateDirectory:
    """Test directory creation."""

    def test_creates_missing_parents(self, tmp_path):
        target = tmp_path / "a" / "b" / "c"

        assert create_directory(target)
        assert directory_exists(target)

    def test_idempotent(self, tmp_path):
        target = tmp_path / "d"

        assert create_directory(target)
        assert create_directory(target)
        assert directory_exists(target)

    def test_file_in_the_way(self, tmp_path):
        """A regular file at the path makes creation fail without raising."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        assert not create_directory(blocker)
        assert not create_directory(blocker / "child")
        assert file_exists(blocker)


class TestReadWrite:
    """Test whole-file read and write."""

    @pytest.mark.parametrize("content", ["hello", "", "line one\nline two\n", "crlf\r\nkept", "naïve ✓"])
    def test_round_trip(self, tmp_path, content):
        """Content reads back exactly as written."""
        path = tmp_path / "f.txt"

        write_file(path, content)

        assert read_file(path) == content

    def test_write_overwrites(self, tmp_path):
        path = tmp_path / "f.txt"

        write_file(path, "a much longer first version")
        write_file(path, "short")

        assert read_file(path) == "short"

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError) as exc:
            read_file(tmp_path / "missing.txt")

        assert "missing.txt" in str(exc.value)

    def test_read_directory(self, tmp_path):
        """Reading something that isn't a regular file raises IOError."""
        with pytest.raises(IOError):
            read_file(tmp_path)

    def test_read_undecodable(self, tmp_path):
        path = tmp_path / "bin.dat"
        path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(IOError) as exc:
            read_file(path)

        assert isinstance(exc.value.__cause__, UnicodeDecodeError)

    def test_write_into_missing_directory(self, tmp_path):
        path = tmp_path / "nowhere" / "f.txt"

        with pytest.raises(IOError) as exc:
            write_file(path, "x")

        assert str(path) in str(exc.value)
        assert exc.value.__cause__ is not None


class TestAppend:
    """Test appending."""

    def test_append_adds_terminator(self, tmp_path):
        path = tmp_path / "f.txt"

        write_file(path, "A")
        append_file(path, "B")

        assert read_file(path) == "A" + "B" + os.linesep

    def test_append_creates_file(self, tmp_path):
        path = tmp_path / "new.txt"

        append_file(path, "first")

        assert read_file(path) == "first" + os.linesep

    def test_custom_terminator(self, tmp_path):
        path = tmp_path / "f.txt"

        append_file(path, "one", line_terminator="\n")
        append_file(path, "two", line_terminator="\n")

        assert read_file(path) == "one\ntwo\n"

    def test_append_into_missing_directory(self, tmp_path):
        with pytest.raises(IOError):
            append_file(tmp_path / "nowhere" / "f.txt", "x")


class TestDelete:
    """Test file and directory deletion."""

    def test_delete_missing(self, tmp_path):
        """Deleting a missing path returns False and does not raise."""
        assert delete_file(tmp_path / "missing.txt") is False

    def test_delete_existing(self, tmp_path):
        path = tmp_path / "f.txt"
        write_file(path, "x")

        assert delete_file(path) is True
        assert not file_exists(path)

    def test_delete_directory_raises(self, tmp_path):
        target = tmp_path / "d"
        target.mkdir()

        with pytest.raises(IOError):
            delete_file(target)

        assert directory_exists(target)

    def test_remove_empty_directory(self, tmp_path):
        target = tmp_path / "d"
        target.mkdir()

        assert remove_directory(target) is True
        assert not directory_exists(target)

    def test_remove_missing_directory(self, tmp_path):
        assert remove_directory(tmp_path / "missing") is False

    def test_remove_non_empty_directory(self, tmp_path):
        """A non-empty directory is reported, not silently kept."""
        target = tmp_path / "d"
        target.mkdir()
        (target / "f.txt").write_text("x")

        with pytest.raises(IOError):
            remove_directory(target)

        assert directory_exists(target)


class TestInvalidPaths:
    """Paths the OS rejects outright surface as IOError."""

    BAD = "a\x00b"

    def test_write(self, tmp_path):
        with pytest.raises(IOError) as exc:
            write_file(str(tmp_path) + "/" + self.BAD, "x")

        assert isinstance(exc.value.__cause__, ValueError)

    def test_append(self, tmp_path):
        with pytest.raises(IOError):
            append_file(str(tmp_path) + "/" + self.BAD, "x")

    def test_delete(self, tmp_path):
        with pytest.raises(IOError):
            delete_file(str(tmp_path) + "/" + self.BAD)

    def test_remove_directory(self, tmp_path):
        with pytest.raises(IOError):
            remove_directory(str(tmp_path) + "/" + self.BAD)

    def test_unencodable_content(self, tmp_path):
        with pytest.raises(IOError):
            write_file(tmp_path / "f.txt", "snowman ☃", encoding="ascii")


requires_permissions = pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root or on this platform"
)


@requires_permissions
class TestPermissionDenied:
    """Test behaviour when the filesystem refuses access."""

    @pytest.fixture
    def locked_dir(self, tmp_path):
        """A directory whose write permission has been removed."""
        locked = tmp_path / "locked"
        locked.mkdir()
        (locked / "inside.txt").write_text("x")
        locked.chmod(0o500)
        yield locked
        locked.chmod(0o700)

    def test_read_unreadable_file(self, tmp_path):
        path = tmp_path / "secret.txt"
        path.write_text("x")
        path.chmod(0o000)
        try:
            with pytest.raises(IOError) as exc:
                read_file(path)
        finally:
            path.chmod(0o600)

        assert isinstance(exc.value.__cause__, PermissionError)

    def test_delete_denied(self, locked_dir):
        target = locked_dir / "inside.txt"

        with pytest.raises(IOError) as exc:
            delete_file(target)

        assert isinstance(exc.value.__cause__, PermissionError)
        assert file_exists(target)

    def test_create_directory_denied(self, locked_dir):
        assert create_directory(locked_dir / "child" / "grandchild") is False
        assert not directory_exists(locked_dir / "child")

    def test_write_denied(self, locked_dir):
        with pytest.raises(IOError):
            write_file(locked_dir / "new.txt", "x")


class TestInspection:
    """Test get_file_info and list_directory."""

    def test_file_info(self, tmp_path):
        path = tmp_path / "notes.md"
        path.write_text("12345")

        details = get_file_info(path)

        assert isinstance(details, FileInfo)
        assert details.name == "notes.md"
        assert details.size == 5
        assert details.is_file
        assert not details.is_dir
        assert details.extension == ".md"
        assert len(details.permissions) == 3

    def test_directory_info_has_zero_size(self, tmp_path):
        details = get_file_info(tmp_path)

        assert details.is_dir
        assert details.size == 0

    def test_file_info_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_file_info(tmp_path / "missing")

    def test_list_directory_sorted(self, tmp_path):
        (tmp_path / "b.txt").write_text("b")
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "sub").mkdir()

        names = [entry.name for entry in list_directory(tmp_path)]

        assert names == ["a.txt", "b.txt", "sub"]

    def test_list_not_a_directory(self, tmp_path):
        path = tmp_path / "f.txt"
        path.write_text("x")

        with pytest.raises(NotADirectoryError):
            list_directory(path)

    def test_list_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list_directory(tmp_path / "missing")


class TestScenario:
    """End-to-end walk through the operations."""

    def test_scenario(self, tmp_path):
        d = tmp_path / "d"
        f = d / "f.txt"

        assert create_directory(d)
        write_file(f, "hello")
        assert read_file(f) == "hello"

        append_file(f, "world")
        assert read_file(f) == "hello" + "world" + os.linesep

        assert delete_file(f)
        assert not file_exists(f)


class TestFileOperator:
    """Test FileOperator audit logging."""

    @pytest.fixture
    def logger(self, tmp_path):
        return AuditLogger(log_path=str(tmp_path / "logs" / "audit.jsonl"))

    @pytest.fixture
    def operator(self, logger):
        return FileOperator(settings=Settings(line_terminator="lf"), logger=logger)

    def test_write_and_read_logged(self, tmp_path, operator, logger):
        path = tmp_path / "f.txt"

        operator.write_file(path, "hello")
        assert operator.read_file(path) == "hello"

        entries = logger.get_recent()
        assert len(entries) == 2
        assert entries[0].action_type == ActionType.READ.value
        assert entries[1].action_type == ActionType.WRITE.value
        assert all(e.status == ActionStatus.EXECUTED.value for e in entries)
        assert entries[0].target == str(path)

    def test_append_uses_configured_terminator(self, tmp_path, operator):
        path = tmp_path / "f.txt"

        operator.write_file(path, "A")
        operator.append_file(path, "B")

        assert operator.read_file(path) == "AB\n"

    def test_failure_logged_and_reraised(self, tmp_path, operator, logger):
        with pytest.raises(FileNotFoundError):
            operator.read_file(tmp_path / "missing.txt")

        failed = logger.get_failed_actions()
        assert len(failed) == 1
        assert failed[0].action_type == ActionType.READ.value

    def test_create_directory_failure_logged(self, tmp_path, operator, logger):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        assert not operator.create_directory(blocker)
        assert logger.get_recent(limit=1)[0].status == ActionStatus.FAILED.value

    def test_delete_missing_logged_as_executed(self, tmp_path, operator, logger):
        assert operator.delete_file(tmp_path / "missing.txt") is False

        entry = logger.get_recent(limit=1)[0]
        assert entry.action_type == ActionType.DELETE.value
        assert entry.result == "Nothing to delete"

    def test_existence_checks_not_logged(self, tmp_path, operator, logger):
        operator.file_exists(tmp_path)
        operator.directory_exists(tmp_path)

        assert logger.get_recent() == []

    def test_audit_disabled(self, tmp_path, logger):
        operator = FileOperator(settings=Settings(audit_enabled=False), logger=logger)

        operator.write_file(tmp_path / "f.txt", "x")

        assert logger.get_recent() == []

    def test_without_logger(self, tmp_path):
        operator = FileOperator()
        path = tmp_path / "f.txt"

        operator.write_file(path, "x")

        assert operator.read_file(path) == "x"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
