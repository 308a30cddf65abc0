"""
Demonstration routine.

Walks through every file operation in order against a scratch directory and
reports each step. Failures in one step are reported and the walk carries on.
"""

import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .file_ops import FileOperator


TEXT_FILE = "myTextFile.txt"
LOG_FILE = "anotherFile.log"

TEXT_CONTENT = "Hello, this is a test line.\nAnother line here."
APPENDED_CONTENT = "This line was appended.\nFinal line."
LOG_CONTENT = (
    "2025-06-22 19:15:00 - INFO: Application started.\n"
    "2025-06-22 19:15:05 - DEBUG: Processing user request."
)


@dataclass
class DemoStep:
    """Outcome of one step of the demo."""
    name: str
    success: bool
    detail: str = ""


@dataclass
class DemoReport:
    """Everything the demo did, in order."""
    directory: str
    steps: List[DemoStep] = field(default_factory=list)
    cleaned_up: bool = False

    @property
    def success(self) -> bool:
        return self.cleaned_up and all(step.success for step in self.steps)

    def step(self, name: str) -> Optional[DemoStep]:
        for s in self.steps:
            if s.name == name:
                return s
        return None


def run_demo(
    base_dir: str = "myTestDirectory",
    operator: Optional[FileOperator] = None,
    echo: Callable[[str], None] = print
) -> DemoReport:
    """
    Run the demonstration against base_dir.

    Args:
        base_dir: Scratch directory to create and remove again
        operator: FileOperator to use (a plain one if omitted)
        echo: Sink for progress lines

    Returns:
        DemoReport with per-step outcomes
    """
    ops = operator or FileOperator()
    report = DemoReport(directory=str(base_dir))
    text_path = os.path.join(base_dir, TEXT_FILE)
    log_path = os.path.join(base_dir, LOG_FILE)

    def record(name: str, success: bool, detail: str = "") -> None:
        report.steps.append(DemoStep(name=name, success=success, detail=detail))

    echo("--- File Handling Utility Demo ---")

    # 1. Directory
    echo(f"Creating directory: {base_dir}")
    created = ops.create_directory(base_dir)
    echo("Directory created or already exists." if created else "Failed to create directory.")
    echo(f"Does directory exist? {ops.directory_exists(base_dir)}")
    record("create_directory", created)

    # 2. Write
    echo(f"\nWriting to file: {text_path}")
    try:
        ops.write_file(text_path, TEXT_CONTENT)
        echo(f"Content successfully written to {text_path}")
        record("write_file", True)
    except OSError as e:
        echo(f"Error writing to file: {e}")
        record("write_file", False, str(e))
    echo(f"Does file exist? {ops.file_exists(text_path)}")

    # 3. Read
    echo(f"\nReading from file: {text_path}")
    try:
        content = ops.read_file(text_path)
        echo(f"Content read:\n{content}")
        record("read_file", content == TEXT_CONTENT, content)
    except OSError as e:
        echo(f"Error reading from file: {e}")
        record("read_file", False, str(e))

    # 4. Append
    echo(f"\nAppending to file: {text_path}")
    try:
        ops.append_file(text_path, APPENDED_CONTENT)
        echo(f"Content successfully appended to {text_path}")
        content = ops.read_file(text_path)
        echo(f"Content after append:\n{content}")
        expected = TEXT_CONTENT + APPENDED_CONTENT + ops.settings.terminator
        record("append_file", content == expected, content)
    except OSError as e:
        echo(f"Error appending to file: {e}")
        record("append_file", False, str(e))

    # 5. Second file
    echo(f"\nWriting another file: {log_path}")
    try:
        ops.write_file(log_path, LOG_CONTENT)
        echo(f"Content successfully written to {log_path}")
        record("write_log_file", True)
    except OSError as e:
        echo(f"Error writing to file: {e}")
        record("write_log_file", False, str(e))

    # 6. Delete
    echo(f"\nDeleting file: {log_path}")
    try:
        if ops.delete_file(log_path):
            echo(f"{log_path} deleted successfully.")
            record("delete_file", True)
        else:
            echo(f"{log_path} did not exist.")
            record("delete_file", False, "did not exist")
    except OSError as e:
        echo(f"Error deleting file: {e}")
        record("delete_file", False, str(e))
    echo(f"Does {log_path} exist after deletion? {ops.file_exists(log_path)}")

    # Cleanup
    echo("\nCleaning up...")
    try:
        if ops.delete_file(text_path):
            echo(f"{text_path} deleted.")
        if ops.remove_directory(base_dir):
            echo(f"{base_dir} directory deleted.")
        report.cleaned_up = not ops.directory_exists(base_dir)
    except OSError as e:
        echo(f"Cleanup failed: {e}")
        report.cleaned_up = False
    echo("Cleanup complete." if report.cleaned_up else "Cleanup incomplete.")

    return report
