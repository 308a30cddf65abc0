#!/usr/bin/env python3
"""
fhu - File Handling Utility

Main entry point for the command line front-end.
"""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from filehandling import AuditLogger, FileOperator, Settings, run_demo
from filehandling import __version__


console = Console()


def get_settings(ctx: click.Context) -> Settings:
    """Get the settings loaded for this invocation."""
    return ctx.obj["settings"]


def get_operator(ctx: click.Context) -> FileOperator:
    """Get a configured file operator instance."""
    settings = get_settings(ctx)
    logger = AuditLogger(log_path=settings.audit_log) if settings.audit_enabled else None
    return FileOperator(settings=settings, logger=logger)


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="fhu")
@click.option("--config", "config_path", default="config.yaml", show_default=True,
              help="Path to the YAML configuration file.")
@click.pass_context
def fhu(ctx, config_path):
    """
    fhu - File Handling Utility

    Check, create, read, write, append to and delete files and directories.
    """
    ctx.ensure_object(dict)
    ctx.obj["settings"] = Settings.load(config_path)


@fhu.command()
@click.argument("path")
@click.pass_context
def exists(ctx, path):
    """Report whether PATH is a file, a directory, or missing."""
    ops = get_operator(ctx)
    if ops.file_exists(path):
        console.print(f"📄 [green]file[/green] {escape(path)}")
    elif ops.directory_exists(path):
        console.print(f"📁 [green]directory[/green] {escape(path)}")
    else:
        console.print(f"❌ [red]missing[/red] {escape(path)}")
        sys.exit(1)


@fhu.command()
@click.argument("path")
@click.pass_context
def mkdir(ctx, path):
    """Create directory PATH and any missing parents."""
    if get_operator(ctx).create_directory(path):
        console.print(f"[green]Directory ready:[/green] {escape(path)}")
    else:
        fail(f"Failed to create directory: {path}")


@fhu.command()
@click.argument("path")
@click.pass_context
def read(ctx, path):
    """Print the content of file PATH."""
    try:
        content = get_operator(ctx).read_file(path)
    except OSError as e:
        fail(str(e))
    click.echo(content, nl=False)


@fhu.command()
@click.argument("path")
@click.argument("content")
@click.pass_context
def write(ctx, path, content):
    """Write CONTENT to PATH, replacing what was there."""
    try:
        get_operator(ctx).write_file(path, content)
    except OSError as e:
        fail(str(e))
    console.print(f"[green]Written:[/green] {escape(path)} ({len(content)} characters)")


@fhu.command()
@click.argument("path")
@click.argument("content")
@click.pass_context
def append(ctx, path, content):
    """Append CONTENT and a line terminator to PATH."""
    try:
        get_operator(ctx).append_file(path, content)
    except OSError as e:
        fail(str(e))
    console.print(f"[green]Appended:[/green] {escape(path)} ({len(content)} characters)")


@fhu.command()
@click.argument("path")
@click.pass_context
def delete(ctx, path):
    """Delete file PATH."""
    try:
        deleted = get_operator(ctx).delete_file(path)
    except OSError as e:
        fail(str(e))
    if not deleted:
        fail(f"Nothing to delete: {path}")
    console.print(f"[green]Deleted:[/green] {escape(path)}")


@fhu.command()
@click.argument("path")
@click.pass_context
def rmdir(ctx, path):
    """Remove empty directory PATH."""
    try:
        removed = get_operator(ctx).remove_directory(path)
    except OSError as e:
        fail(str(e))
    if not removed:
        fail(f"Nothing to remove: {path}")
    console.print(f"[green]Removed:[/green] {escape(path)}")


@fhu.command()
@click.argument("path")
@click.pass_context
def info(ctx, path):
    """Show details about PATH."""
    try:
        details = get_operator(ctx).get_file_info(path)
    except OSError as e:
        fail(str(e))

    table = Table(title=escape(details.name) or escape(details.path), show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_row("Path", escape(details.path))
    table.add_row("Type", "directory" if details.is_dir else "file" if details.is_file else "other")
    table.add_row("Size", f"{details.size} bytes")
    table.add_row("Modified", details.modified)
    table.add_row("Permissions", details.permissions)
    console.print(table)


@fhu.command("ls")
@click.argument("path", default=".")
@click.pass_context
def list_cmd(ctx, path):
    """List the contents of directory PATH."""
    try:
        entries = get_operator(ctx).list_directory(path)
    except OSError as e:
        fail(str(e))

    if not entries:
        console.print("[dim]Directory is empty.[/dim]")
        return

    table = Table(title=escape(path))
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("Modified", style="dim")
    table.add_column("Mode", style="dim")

    for entry in entries:
        name = f"[bold blue]{escape(entry.name)}/[/bold blue]" if entry.is_dir else escape(entry.name)
        table.add_row(name, "" if entry.is_dir else str(entry.size), entry.modified.split(".")[0], entry.permissions)

    console.print(table)


@fhu.command()
@click.argument("directory", required=False)
@click.pass_context
def demo(ctx, directory):
    """Run the demonstration walk-through in DIRECTORY."""
    settings = get_settings(ctx)
    target = directory or settings.demo_directory

    console.print(Panel.fit(
        "[bold blue]File Handling Utility[/bold blue]\n"
        f"[dim]Demo directory: {escape(target)}[/dim]",
        title="🗂  Demo"
    ))

    report = run_demo(target, operator=get_operator(ctx), echo=lambda line: console.print(escape(line)))

    if not report.success:
        failed = [step.name for step in report.steps if not step.success]
        if not report.cleaned_up:
            failed.append("cleanup")
        fail(f"Demo finished with failures: {', '.join(failed)}")


@fhu.command()
@click.option("--limit", default=20, show_default=True, help="Number of entries to show.")
@click.pass_context
def audit(ctx, limit):
    """View the audit log."""
    settings = get_settings(ctx)
    logger = AuditLogger(log_path=settings.audit_log)
    entries = logger.get_recent(limit=limit)

    if not entries:
        console.print("[dim]No audit entries found.[/dim]")
        return

    table = Table(title="Recent Audit Log")
    table.add_column("Time", style="dim")
    table.add_column("Type")
    table.add_column("Action")
    table.add_column("Status")

    for entry in entries:
        time_str = entry.timestamp.split("T")[1].split(".")[0] if "T" in entry.timestamp else entry.timestamp

        status_str = entry.status
        if entry.status == "executed":
            status_str = f"[green]{entry.status}[/green]"
        elif entry.status == "failed":
            status_str = f"[red]{entry.status}[/red]"

        description = entry.action_description
        if len(description) > 50:
            description = description[:50] + "..."

        table.add_row(time_str, entry.action_type, escape(description), status_str)

    console.print(table)


if __name__ == "__main__":
    fhu()
