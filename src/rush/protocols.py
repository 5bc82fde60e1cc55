"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for rush.
Designing to interfaces enables:
- Loose coupling between the object layer and raw I/O
- Easy substitution of test doubles for the filesystem backend
- A clear contract that every filesystem object kind satisfies

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Protocol, TypeVar, runtime_checkable

from rush.types import ObjectType

SelfObject = TypeVar("SelfObject", bound="FilesystemObject")


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for raw filesystem operations.

    Implementations raise ``OSError`` subclasses on failure; the object
    layer translates them into ``FSError`` kinds.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def object_type(self, path: Path) -> ObjectType:
        """Classify what a path currently denotes.

        Args:
            path: Path to classify.

        Returns:
            The detected ObjectType.
        """
        ...

    def read_text(self, path: Path) -> str:
        """Read text content from a file.

        Args:
            path: Path to the file.

        Returns:
            File content as string.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write text content to a file, truncating it.

        Args:
            path: Path to the file.
            content: Content to write.
        """
        ...

    def create_text(self, path: Path, content: str) -> None:
        """Write text content to a new file.

        Args:
            path: Path to the file.
            content: Content to write.

        Raises:
            FileExistsError: If the file already exists.
        """
        ...

    def append_text(self, path: Path, content: str) -> None:
        """Append text content to a file.

        Args:
            path: Path to the file.
            content: Content to append.
        """
        ...

    def size(self, path: Path) -> int:
        """Get the size of a file in bytes.

        Args:
            path: Path to the file.

        Returns:
            Size in bytes.
        """
        ...

    def iterdir(self, path: Path) -> list[Path]:
        """List the immediate children of a directory.

        Args:
            path: Path to the directory.

        Returns:
            Child paths sorted by name.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
        """
        ...

    def rmdir(self, path: Path) -> None:
        """Remove an empty directory.

        Args:
            path: Path to remove.
        """
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree.

        Args:
            path: Path to remove.
        """
        ...

    def rename(self, src: Path, dst: Path) -> None:
        """Atomically rename a path.

        Args:
            src: Current path.
            dst: New path.
        """
        ...

    def copyfile(self, src: Path, dst: Path) -> None:
        """Copy a file's content.

        Args:
            src: Source file.
            dst: Destination file.
        """
        ...

    def copytree(self, src: Path, dst: Path) -> None:
        """Copy a directory tree.

        Args:
            src: Source directory.
            dst: Destination directory.
        """
        ...


@runtime_checkable
class FilesystemObject(Protocol):
    """Protocol shared by every kind of filesystem object.

    A filesystem object is a lightweight descriptor bound to one path.
    Constructing it performs no I/O; each operation re-queries the
    filesystem. Operations raise ``FSError`` subclasses on failure.

    Check-then-act sequences are not atomic. Concurrent mutation of the
    same path by other processes is not guarded against.
    """

    OBJECT_TYPE: ClassVar[ObjectType]

    @property
    def path(self) -> Path:
        """The path this object refers to."""
        ...

    def exists(self) -> bool:
        """Check whether the object exists with the expected type.

        Returns:
            True if it exists, False if nothing exists at the path.

        Raises:
            TypeMismatch: If the path exists as a different kind of object.
        """
        ...

    def create_on_fs(self) -> None:
        """Create the object; a no-op if it already exists."""
        ...

    def create_on_fs_recursive(self) -> None:
        """Create the object and all missing parent directories."""
        ...

    def delete_from_fs(self) -> None:
        """Delete the object; a no-op if it does not exist."""
        ...

    def delete_from_fs_recursive(self, prune_up_to: Path | str | None = None) -> None:
        """Delete the object together with its contents.

        Args:
            prune_up_to: Optional ancestor directory. Empty ancestors below
                it are removed after the object itself.
        """
        ...

    def move_to(self: SelfObject, target: Path | str) -> SelfObject:
        """Move the object to a new location.

        Args:
            target: Destination path.

        Returns:
            A new object bound to the destination.
        """
        ...

    def copy_to(self: SelfObject, target: Path | str) -> SelfObject:
        """Copy the object to a new location.

        Args:
            target: Destination path.

        Returns:
            A new object bound to the destination.
        """
        ...

    def exists_and_is_empty(self) -> bool:
        """Check whether the object exists and has no content.

        Returns:
            True if it exists and is empty.
        """
        ...
