"""Shared data types for rush."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

__all__ = ["ObjectType", "classify"]


class ObjectType(Enum):
    """Kind of filesystem object.

    Used both as the static tag of each object class and as the result of
    classifying an arbitrary path at runtime.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMBOLIC_LINK = "symbolic link"
    UNKNOWN = "unknown object"

    def __str__(self) -> str:
        return self.value


def classify(path: Path | str) -> ObjectType:
    """Determine what a path currently denotes.

    Files and directories are detected through symbolic links, so only a
    dangling link is reported as ``SYMBOLIC_LINK``.

    Args:
        path: Path to inspect.

    Returns:
        The detected ObjectType; UNKNOWN if nothing exists at the path.
    """
    path = Path(path)
    if path.is_file():
        return ObjectType.FILE
    if path.is_dir():
        return ObjectType.DIRECTORY
    if path.is_symlink():
        return ObjectType.SYMBOLIC_LINK
    return ObjectType.UNKNOWN
