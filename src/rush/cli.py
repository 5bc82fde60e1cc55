"""CLI commands using Typer."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from rush.context import AppContext

import typer

from rush import __version__
from rush.config import LOG_LEVELS, ConfigError
from rush.console import ConsoleOutput
from rush.context import create_context
from rush.errors import FSError, NonExistent, TypeMismatch
from rush.logging_setup import configure_logging
from rush.objects import Directory, File, object_for_path
from rush.types import ObjectType

app = typer.Typer(
    name="rush",
    help="Typed filesystem object operations",
    no_args_is_help=True,
)

output = ConsoleOutput()

# Set by the --log-level global option, overrides the configured level
_log_level_override: str | None = None


class WriteMode(str, Enum):
    """How `write` treats an existing file."""

    NEW = "new"
    APPEND = "append"
    OVERWRITE = "overwrite"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        output.console.print(f"rush v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ...)"),
    ] = None,
) -> None:
    """Typed filesystem object operations."""
    global _log_level_override
    if log_level and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")
    _log_level_override = log_level.upper() if log_level else None


# ============================================================================
# Helpers
# ============================================================================


def _get_context(context: AppContext | None) -> AppContext:
    """Create the application context and set up logging.

    Raises:
        typer.Exit: If the configuration is invalid.
    """
    try:
        ctx = context or create_context()
    except ConfigError as e:
        output.show_error(f"Invalid configuration: {e}")
        raise typer.Exit(1) from e
    if _log_level_override:
        ctx.config = ctx.config.model_copy(update={"log_level": _log_level_override})
    configure_logging(
        ctx.config.log_level_number,
        show_time=ctx.config.show_log_time,
    )
    return ctx


def _fail(error: Exception, action: str) -> typer.Exit:
    """Report a failed operation and build the exit to raise."""
    output.show_error(f"{action} failed: {error}")
    return typer.Exit(1)


def _existing_object(ctx: AppContext, path: Path) -> File | Directory:
    """Get the object at path, which must exist."""
    obj = object_for_path(path, ctx.filesystem)
    if not obj.exists():
        raise NonExistent()
    return obj


# ============================================================================
# Object Lifecycle Commands
# ============================================================================


@app.command("touch")
def touch(
    path: Annotated[Path, typer.Argument(help="File to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parent directories")
    ] = False,
    _context=None,
) -> None:
    """Create an empty file if it does not exist."""
    ctx = _get_context(_context)
    file = File(path, filesystem=ctx.filesystem)

    try:
        if parents or ctx.config.create_parents:
            file.create_on_fs_recursive()
        else:
            file.create_on_fs()
    except FSError as e:
        raise _fail(e, f"Creating file {file}") from e
    output.show_success(f"Created file {file}")


@app.command("mkdir")
def mkdir(
    path: Annotated[Path, typer.Argument(help="Directory to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parent directories")
    ] = False,
    _context=None,
) -> None:
    """Create a directory if it does not exist."""
    ctx = _get_context(_context)
    directory = Directory(path, filesystem=ctx.filesystem)

    try:
        if parents or ctx.config.create_parents:
            directory.create_on_fs_recursive()
        else:
            directory.create_on_fs()
    except FSError as e:
        raise _fail(e, f"Creating directory {directory}") from e
    output.show_success(f"Created directory {directory}")


@app.command("rm")
def rm(
    path: Annotated[Path, typer.Argument(help="File or directory to delete")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Delete directory contents as well")
    ] = False,
    prune_up_to: Annotated[
        Path | None,
        typer.Option("--prune-up-to", help="Also remove empty parents below this directory"),
    ] = None,
    _context=None,
) -> None:
    """Delete a file or directory."""
    ctx = _get_context(_context)
    obj = object_for_path(path, ctx.filesystem)

    # Dangling links classify as neither file nor directory
    if ctx.filesystem.object_type(path) is ObjectType.SYMBOLIC_LINK:
        raise _fail(TypeMismatch(ObjectType.SYMBOLIC_LINK), f"Deleting {obj}")

    try:
        if not obj.exists():
            output.show_success(f"Nothing to delete at {obj}")
            return
        if recursive or prune_up_to is not None:
            obj.delete_from_fs_recursive(prune_up_to)
        else:
            obj.delete_from_fs()
    except (FSError, ValueError) as e:
        raise _fail(e, f"Deleting {obj}") from e
    output.show_success(f"Deleted {obj.OBJECT_TYPE} {obj}")


@app.command("mv")
def mv(
    source: Annotated[Path, typer.Argument(help="File or directory to move")],
    target: Annotated[Path, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Move a file or directory, across storage volumes if needed."""
    ctx = _get_context(_context)

    try:
        obj = _existing_object(ctx, source)
        moved = obj.move_to(target)
    except FSError as e:
        raise _fail(e, f"Moving '{source}'") from e
    output.show_success(f"Moved {obj.OBJECT_TYPE} {obj} to {moved}")


@app.command("cp")
def cp(
    source: Annotated[Path, typer.Argument(help="File or directory to copy")],
    target: Annotated[Path, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Copy a file or directory."""
    ctx = _get_context(_context)

    try:
        obj = _existing_object(ctx, source)
        copied = obj.copy_to(target)
    except FSError as e:
        raise _fail(e, f"Copying '{source}'") from e
    output.show_success(f"Copied {obj.OBJECT_TYPE} {obj} to {copied}")


# ============================================================================
# File Content Commands
# ============================================================================


@app.command("cat")
def cat(
    path: Annotated[Path, typer.Argument(help="File to read")],
    _context=None,
) -> None:
    """Print the content of a file."""
    ctx = _get_context(_context)
    file = File(path, filesystem=ctx.filesystem)

    try:
        content = file.read()
    except FSError as e:
        raise _fail(e, f"Reading {file}") from e
    output.show_text(content)


@app.command("write")
def write(
    path: Annotated[Path, typer.Argument(help="File to write")],
    text: Annotated[str, typer.Argument(help="Content to write")],
    mode: Annotated[
        WriteMode, typer.Option("--mode", "-m", help="new, append or overwrite")
    ] = WriteMode.OVERWRITE,
    _context=None,
) -> None:
    """Write text to a file."""
    ctx = _get_context(_context)
    file = File(path, filesystem=ctx.filesystem)

    try:
        if ctx.config.create_parents:
            Directory(path.parent, filesystem=ctx.filesystem).create_on_fs_recursive()
        if mode is WriteMode.NEW:
            file.write_new(text)
        elif mode is WriteMode.APPEND:
            file.append(text)
        else:
            file.overwrite(text)
    except FSError as e:
        raise _fail(e, f"Writing {file}") from e
    output.show_success(f"Wrote {len(text)} characters to {file}")


@app.command("info")
def info(
    path: Annotated[Path, typer.Argument(help="File or directory to describe")],
    _context=None,
) -> None:
    """Show kind, existence, emptiness and size of a path."""
    ctx = _get_context(_context)
    obj = object_for_path(path, ctx.filesystem)

    try:
        output.show_info(obj)
    except FSError as e:
        raise _fail(e, f"Inspecting {obj}") from e


# ============================================================================
# Demo
# ============================================================================


@app.command("demo")
def demo(
    root: Annotated[
        Path | None, typer.Option("--root", help="Directory to run in (default: cwd)")
    ] = None,
    _context=None,
) -> None:
    """Run a short scenario exercising the object operations."""
    ctx = _get_context(_context)
    base = root or Path.cwd()
    fs = ctx.filesystem

    try:
        file = File(base / "lol", filesystem=fs)
        file.overwrite("WTF")
        moved = file.move_to(base / "haha")
        output.show_success(f"Wrote and moved {file} to {moved}")

        empty = File(base / "abc", filesystem=fs)
        empty.create_on_fs()
        output.show_success(f"Created file {empty}")

        nested = Directory(base / "jo" / "roll", filesystem=fs)
        nested.create_on_fs_recursive()
        output.show_success(f"Created directory {nested}")
    except FSError as e:
        raise _fail(e, "Demo") from e
