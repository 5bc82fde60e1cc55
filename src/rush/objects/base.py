"""Base implementation shared by all filesystem object kinds.

All object kinds follow the same algorithms for existence checks, creation,
deletion, moving and copying; they vary only in the raw steps used to
create, delete, copy and inspect themselves.

Pattern: Template Method - the base class defines the algorithm skeleton,
subclasses provide the kind-specific steps.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, TypeVar

from rush.errors import NonExistent, TypeMismatch, translate_os_errors
from rush.filesystem import RealFileSystem
from rush.protocols import FileSystem
from rush.types import ObjectType

logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound="BaseObject")


def quote_path(path: Path | str) -> str:
    """Format a path for display in messages."""
    return f"'{path}'"


class BaseObject(ABC):
    """Base class for filesystem object descriptors.

    A descriptor is bound to exactly one path. Construction performs no
    filesystem access, and no state besides the path is kept between calls.
    """

    OBJECT_TYPE: ClassVar[ObjectType]

    def __init__(self, path: Path | str, filesystem: FileSystem | None = None) -> None:
        """Bind the descriptor to a path.

        Args:
            path: Path this object refers to. It does not need to exist.
            filesystem: Backend performing raw I/O. Defaults to RealFileSystem.
        """
        self._path = Path(path)
        self.fs = filesystem or RealFileSystem()

    @property
    def path(self) -> Path:
        """The path this object refers to."""
        return self._path

    def __str__(self) -> str:
        return quote_path(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseObject):
            return NotImplemented
        return type(self) is type(other) and self._path == other._path

    def __hash__(self) -> int:
        return hash((type(self), self._path))

    @property
    def _title(self) -> str:
        return self.OBJECT_TYPE.value.capitalize()

    def _bind(self: _T, target: Path | str) -> _T:
        return type(self)(target, filesystem=self.fs)

    # ------------------------------------------------------------------
    # Kind-specific steps
    # ------------------------------------------------------------------

    @abstractmethod
    def _create(self) -> None:
        """Create the object, assuming nothing exists at the path."""
        ...

    @abstractmethod
    def _delete(self) -> None:
        """Delete the existing object without touching its contents."""
        ...

    @abstractmethod
    def _delete_recursive(self) -> None:
        """Delete the existing object together with its contents."""
        ...

    @abstractmethod
    def _copy(self, target: Path) -> None:
        """Duplicate the object's content at target."""
        ...

    @abstractmethod
    def _is_empty(self) -> bool:
        """Check the existing object for content. May raise OSError."""
        ...

    # ------------------------------------------------------------------
    # Shared algorithms
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        """Check whether the object exists with the expected type.

        Returns:
            True if it exists, False if nothing exists at the path.

        Raises:
            TypeMismatch: If the path exists as a different kind of object.
        """
        with translate_os_errors():
            if not self.fs.exists(self._path):
                return False
            found = self.fs.object_type(self._path)
        if found is self.OBJECT_TYPE:
            return True
        logger.warning("%s path %s does not point to a %s", self._title, self, self.OBJECT_TYPE)
        raise TypeMismatch(found)

    def create_on_fs(self) -> None:
        """Create the object on the filesystem.

        Returns early if the object already exists.

        Raises:
            TypeMismatch: If the path exists as a different kind of object.
            NonExistent: If the parent directory is missing.
        """
        logger.debug("Creating %s %s", self.OBJECT_TYPE, self)
        if self.exists():
            logger.debug("%s %s already exists", self._title, self)
            return
        with translate_os_errors():
            self._create()

    def create_on_fs_recursive(self) -> None:
        """Create the object and all parent directories that do not exist."""
        logger.debug("Recursively creating %s with path %s", self.OBJECT_TYPE, self)
        with translate_os_errors():
            self.fs.mkdir(self._path.parent, parents=True, exist_ok=True)
        self.create_on_fs()

    def delete_from_fs(self) -> None:
        """Delete the object from the filesystem.

        Succeeds without changes if the object does not exist.
        """
        logger.debug("Deleting %s %s", self.OBJECT_TYPE, self)
        if not self.exists():
            logger.debug("%s %s did not exist in the first place", self._title, self)
            return
        with translate_os_errors():
            self._delete()

    def delete_from_fs_recursive(self, prune_up_to: Path | str | None = None) -> None:
        """Delete the object together with its contents.

        Ancestors are left alone unless ``prune_up_to`` is given. In that
        case each now-empty ancestor strictly below the boundary is removed,
        innermost first, stopping at the first one that still has entries.

        Args:
            prune_up_to: Ancestor directory bounding the pruning.

        Raises:
            ValueError: If prune_up_to is not an ancestor of this object.
        """
        logger.debug("Recursively deleting %s %s", self.OBJECT_TYPE, self)
        boundary = self._pruning_boundary(prune_up_to) if prune_up_to is not None else None
        if self.exists():
            with translate_os_errors():
                self._delete_recursive()
        else:
            logger.debug("%s %s did not exist in the first place", self._title, self)
        if boundary is not None:
            self._prune_ancestors(boundary)

    def _pruning_boundary(self, prune_up_to: Path | str) -> Path:
        boundary = Path(os.path.abspath(prune_up_to))
        if boundary not in Path(os.path.abspath(self._path)).parents:
            raise ValueError(f"{quote_path(prune_up_to)} is not an ancestor of {self}")
        return boundary

    def _prune_ancestors(self, boundary: Path) -> None:
        from rush.objects.directory import Directory

        current = Path(os.path.abspath(self._path)).parent
        while current != boundary:
            ancestor = Directory(current, filesystem=self.fs)
            if not ancestor.exists_and_is_empty():
                break
            logger.debug("Pruning empty ancestor directory %s", ancestor)
            ancestor.delete_from_fs()
            current = current.parent

    def move_to(self: _T, target: Path | str) -> _T:
        """Move the object to a new location.

        Tries an atomic rename first. If that fails, which is expected when
        source and target live on different storage volumes, the object is
        copied to the target and the original is deleted.

        The descriptor this is called on no longer refers to the object
        afterwards; use the returned one.

        Args:
            target: Destination path.

        Returns:
            A new object bound to the destination.

        Raises:
            NonExistent: If the object does not exist.
            TypeMismatch: If the path exists as a different kind of object.
        """
        if not self.exists():
            raise NonExistent()
        target = Path(target)
        logger.debug("Moving %s %s to %s", self.OBJECT_TYPE, self, quote_path(target))
        try:
            self.fs.rename(self._path, target)
        except OSError as e:
            logger.debug(
                "Could not rename %s from %s to %s: %s - trying copy-delete next",
                self.OBJECT_TYPE,
                self,
                quote_path(target),
                e,
            )
            self.copy_to(target)
            self.delete_from_fs_recursive()
        return self._bind(target)

    def copy_to(self: _T, target: Path | str) -> _T:
        """Copy the object to a new location, leaving the original intact.

        Args:
            target: Destination path.

        Returns:
            A new object bound to the destination.

        Raises:
            NonExistent: If the object does not exist.
            TypeMismatch: If the path exists as a different kind of object.
        """
        if not self.exists():
            raise NonExistent()
        target = Path(target)
        logger.debug("Copying %s %s to %s", self.OBJECT_TYPE, self, quote_path(target))
        with translate_os_errors():
            self._copy(target)
        return self._bind(target)

    def exists_and_is_empty(self) -> bool:
        """Check whether the object exists and has no content.

        Errors of ``exists()`` propagate. If the content cannot be inspected
        after the existence check, the object is reported as not empty.
        """
        if not self.exists():
            return False
        try:
            return self._is_empty()
        except OSError as e:
            logger.debug("Could not inspect %s %s: %s", self.OBJECT_TYPE, self, e)
            return False
