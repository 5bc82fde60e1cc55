"""Filesystem backend used by rush objects.

This module provides the thin layer of raw filesystem calls that File and
Directory delegate to. Keeping it separate enables testing the object
algorithms against a substituted backend (for example one whose rename
always fails, as it does across storage volumes). The RealFileSystem
implementation wraps standard library operations and raises plain
``OSError`` subclasses; translating those is the caller's job.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from rush.types import ObjectType, classify

ENCODING = "utf-8"


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists (following symbolic links)."""
        return path.exists()

    def object_type(self, path: Path) -> ObjectType:
        """Classify what the path currently denotes."""
        return classify(path)

    def read_text(self, path: Path) -> str:
        """Read text content from a file."""
        return path.read_text(encoding=ENCODING)

    def write_text(self, path: Path, content: str) -> None:
        """Write text content to a file, creating or truncating it."""
        path.write_text(content, encoding=ENCODING)

    def create_text(self, path: Path, content: str) -> None:
        """Write text content to a file that must not exist yet."""
        with path.open("x", encoding=ENCODING) as handle:
            handle.write(content)

    def append_text(self, path: Path, content: str) -> None:
        """Append text content to a file, creating it if needed."""
        with path.open("a", encoding=ENCODING) as handle:
            handle.write(content)

    def size(self, path: Path) -> int:
        """Get the size of a file in bytes."""
        return path.stat().st_size

    def iterdir(self, path: Path) -> list[Path]:
        """List the immediate children of a directory."""
        return sorted(path.iterdir())

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory."""
        path.rmdir()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)

    def rename(self, src: Path, dst: Path) -> None:
        """Atomically rename a path; fails across storage volumes."""
        os.rename(src, dst)

    def copyfile(self, src: Path, dst: Path) -> None:
        """Copy file contents, overwriting an existing destination file."""
        shutil.copyfile(src, dst)

    def copytree(self, src: Path, dst: Path) -> None:
        """Copy a directory tree."""
        shutil.copytree(src, dst, symlinks=True)
