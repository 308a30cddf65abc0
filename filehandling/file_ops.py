"""
File operations module.

Thin wrappers over the host filesystem. Existence checks, directory
creation and "nothing to delete" report through booleans; reads, writes,
appends and other failures raise OSError (IOError) with the path and the
underlying cause chained.
"""

import os
from pathlib import Path
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Union

from .logger import AuditLogger, ActionType, ActionStatus
from .settings import Settings


PathType = Union[str, os.PathLike]


@dataclass
class FileInfo:
    """Information about a file or directory."""
    path: str
    name: str
    size: int
    modified: str
    is_dir: bool
    is_file: bool
    extension: str
    permissions: str


def file_exists(path: PathType) -> bool:
    """Return True if path is an existing regular file."""
    try:
        return os.path.isfile(path)
    except (OSError, ValueError, TypeError):
        return False


def directory_exists(path: PathType) -> bool:
    """Return True if path is an existing directory."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError, TypeError):
        return False


def create_directory(path: PathType) -> bool:
    """
    Create a directory and any missing parents.

    Args:
        path: Directory to create

    Returns:
        True if the directory exists afterwards, False if it could not be
        created (permission denied, a file already in the way, ...)
    """
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError):
        return False
    return directory_exists(path)


def read_file(path: PathType, encoding: str = "utf-8") -> str:
    """
    Read the whole content of a text file.

    Line endings are returned exactly as stored.

    Args:
        path: Path to the file
        encoding: File encoding (default: utf-8)

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If the file doesn't exist
        IOError: If the path is not a regular file or can't be read
    """
    path_obj = Path(path)

    if not path_obj.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if not path_obj.is_file():
        raise IOError(f"Not a regular file: {path}")

    try:
        with open(path_obj, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IOError(f"Error reading file {path}: {e}") from e


def write_file(path: PathType, content: str, encoding: str = "utf-8") -> None:
    """
    Write content to a file, replacing whatever was there.

    The file is created if absent. The write is not atomic.

    Raises:
        IOError: On any I/O failure
    """
    try:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)
    except (OSError, ValueError) as e:
        raise IOError(f"Error writing file {path}: {e}") from e


def append_file(path: PathType, content: str, encoding: str = "utf-8", line_terminator: str = os.linesep) -> None:
    """
    Append content and a line terminator to a file.

    The file is created if absent.

    Raises:
        IOError: On any I/O failure
    """
    try:
        with open(path, "a", encoding=encoding, newline="") as f:
            f.write(content)
            f.write(line_terminator)
    except (OSError, ValueError) as e:
        raise IOError(f"Error appending to file {path}: {e}") from e


def delete_file(path: PathType) -> bool:
    """
    Delete a file.

    Returns:
        True if the file was deleted, False if nothing existed at path

    Raises:
        IOError: If the file exists but can't be deleted
    """
    try:
        Path(path).unlink()
    except FileNotFoundError:
        return False
    except (OSError, ValueError) as e:
        raise IOError(f"Error deleting file {path}: {e}") from e
    return True


def remove_directory(path: PathType) -> bool:
    """
    Remove an empty directory.

    Returns:
        True if the directory was removed, False if it didn't exist

    Raises:
        IOError: If the directory is not empty or can't be removed
    """
    try:
        Path(path).rmdir()
    except FileNotFoundError:
        return False
    except (OSError, ValueError) as e:
        raise IOError(f"Error removing directory {path}: {e}") from e
    return True


def get_file_info(path: PathType) -> FileInfo:
    """
    Get information about a file or directory.

    Args:
        path: Path to the file/directory

    Returns:
        FileInfo object with file details

    Raises:
        FileNotFoundError: If path doesn't exist
    """
    path_obj = Path(path)

    if not path_obj.exists():
        raise FileNotFoundError(f"Path not found: {path}")

    stat = path_obj.stat()

    return FileInfo(
        path=str(path_obj.resolve()),
        name=path_obj.name,
        size=stat.st_size if path_obj.is_file() else 0,
        modified=datetime.fromtimestamp(stat.st_mtime).isoformat(),
        is_dir=path_obj.is_dir(),
        is_file=path_obj.is_file(),
        extension=path_obj.suffix,
        permissions=oct(stat.st_mode)[-3:]
    )


def list_directory(path: PathType) -> List[FileInfo]:
    """
    List contents of a directory, sorted by name.

    Raises:
        FileNotFoundError: If the directory doesn't exist
        NotADirectoryError: If path is not a directory
    """
    path_obj = Path(path)

    if not path_obj.exists():
        raise FileNotFoundError(f"Directory not found: {path}")

    if not path_obj.is_dir():
        raise NotADirectoryError(f"Not a directory: {path}")

    files = []
    for item in sorted(path_obj.iterdir(), key=lambda p: p.name):
        try:
            files.append(get_file_info(item))
        except FileNotFoundError:
            # Removed between listing and stat
            continue

    return files


class FileOperator:
    """File operations bound to settings, with every call recorded in the audit log."""

    def __init__(self, settings: Optional[Settings] = None, logger: Optional[AuditLogger] = None):
        """
        Initialize FileOperator.

        Args:
            settings: Settings instance (defaults are used if omitted)
            logger: Audit logger instance; nothing is logged if omitted
        """
        self.settings = settings or Settings()
        self.logger = logger if self.settings.audit_enabled else None

    def _record(
        self,
        action_type: ActionType,
        description: str,
        path: PathType,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[dict] = None
    ) -> None:
        if self.logger is None:
            return
        self.logger.log_action(
            action_type=action_type,
            description=description,
            target=str(path),
            status=status,
            result=result,
            metadata=metadata
        )

    def file_exists(self, path: PathType) -> bool:
        return file_exists(path)

    def directory_exists(self, path: PathType) -> bool:
        return directory_exists(path)

    def create_directory(self, path: PathType) -> bool:
        created = create_directory(path)
        self._record(
            ActionType.SYSTEM,
            f"Create directory: {path}",
            path,
            status=ActionStatus.EXECUTED if created else ActionStatus.FAILED,
            result="Directory ready" if created else "Could not create directory"
        )
        return created

    def read_file(self, path: PathType) -> str:
        try:
            content = read_file(path, encoding=self.settings.encoding)
        except OSError as e:
            self._record(ActionType.READ, f"Failed to read {path}", path,
                         status=ActionStatus.FAILED, result=f"Error: {e}")
            raise

        self._record(ActionType.READ, f"Read file: {path}", path,
                     result=f"Read {len(content)} characters")
        return content

    def write_file(self, path: PathType, content: str) -> None:
        try:
            write_file(path, content, encoding=self.settings.encoding)
        except OSError as e:
            self._record(ActionType.WRITE, f"Failed to write {path}", path,
                         status=ActionStatus.FAILED, result=f"Error: {e}")
            raise

        self._record(ActionType.WRITE, f"Wrote file: {path}", path,
                     result=f"Wrote {len(content)} characters",
                     metadata={"encoding": self.settings.encoding})

    def append_file(self, path: PathType, content: str) -> None:
        try:
            append_file(path, content, encoding=self.settings.encoding,
                        line_terminator=self.settings.terminator)
        except OSError as e:
            self._record(ActionType.WRITE, f"Failed to append to {path}", path,
                         status=ActionStatus.FAILED, result=f"Error: {e}")
            raise

        self._record(ActionType.WRITE, f"Appended to file: {path}", path,
                     result=f"Appended {len(content)} characters",
                     metadata={"encoding": self.settings.encoding})

    def delete_file(self, path: PathType) -> bool:
        try:
            deleted = delete_file(path)
        except OSError as e:
            self._record(ActionType.DELETE, f"Failed to delete {path}", path,
                         status=ActionStatus.FAILED, result=f"Error: {e}")
            raise

        self._record(ActionType.DELETE, f"Delete file: {path}", path,
                     result="File deleted" if deleted else "Nothing to delete")
        return deleted

    def remove_directory(self, path: PathType) -> bool:
        try:
            removed = remove_directory(path)
        except OSError as e:
            self._record(ActionType.DELETE, f"Failed to remove directory {path}", path,
                         status=ActionStatus.FAILED, result=f"Error: {e}")
            raise

        self._record(ActionType.DELETE, f"Remove directory: {path}", path,
                     result="Directory removed" if removed else "Nothing to remove")
        return removed

    def get_file_info(self, path: PathType) -> FileInfo:
        return get_file_info(path)

    def list_directory(self, path: PathType) -> List[FileInfo]:
        return list_directory(path)
