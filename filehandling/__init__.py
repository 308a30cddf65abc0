# File Handling Utility
"""
Simple helpers for common file handling operations, an audit log of what
they did, and a demonstration routine.
"""

from .file_ops import (
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
from .logger import AuditLogger, AuditEntry, ActionType, ActionStatus
from .settings import Settings
from .demo import run_demo, DemoReport

__all__ = [
    "FileInfo",
    "FileOperator",
    "file_exists",
    "directory_exists",
    "create_directory",
    "read_file",
    "write_file",
    "append_file",
    "delete_file",
    "remove_directory",
    "get_file_info",
    "list_directory",
    "AuditLogger",
    "AuditEntry",
    "ActionType",
    "ActionStatus",
    "Settings",
    "run_demo",
    "DemoReport",
]

__version__ = "0.1.0"
