"""Filesystem object kinds.

SymbolicLink is reserved as a third kind and not implemented yet.
"""

from __future__ import annotations

from pathlib import Path

from rush.filesystem import RealFileSystem
from rush.objects.base import BaseObject
from rush.objects.directory import Directory
from rush.objects.file import File
from rush.protocols import FileSystem
from rush.types import ObjectType

__all__ = ["BaseObject", "Directory", "File", "object_for_path"]


def object_for_path(path: Path | str, filesystem: FileSystem | None = None) -> File | Directory:
    """Get the object kind matching what the path currently denotes.

    Args:
        path: Path to inspect.
        filesystem: Optional backend passed to the created object.

    Returns:
        A Directory if the path is a directory, a File otherwise
        (including when nothing exists at the path).
    """
    fs = filesystem or RealFileSystem()
    if fs.object_type(Path(path)) is ObjectType.DIRECTORY:
        return Directory(path, filesystem=fs)
    return File(path, filesystem=fs)
