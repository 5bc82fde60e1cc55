"""Directories on the filesystem."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from rush.errors import NonExistent, translate_os_errors
from rush.objects.base import BaseObject
from rush.objects.file import File
from rush.types import ObjectType


class Directory(BaseObject):
    """A directory on the filesystem.

    ``create_on_fs`` creates only the leaf directory and ``delete_from_fs``
    only removes an empty one. The recursive variants handle missing parents
    and existing contents respectively.
    """

    OBJECT_TYPE: ClassVar[ObjectType] = ObjectType.DIRECTORY

    def _create(self) -> None:
        self.fs.mkdir(self._path)

    def _delete(self) -> None:
        self.fs.rmdir(self._path)

    def _delete_recursive(self) -> None:
        self.fs.rmtree(self._path)

    def _copy(self, target: Path) -> None:
        self.fs.copytree(self._path, target)

    def _is_empty(self) -> bool:
        return not self.fs.iterdir(self._path)

    def entries(self) -> list[File | Directory]:
        """List the immediate children of the directory.

        Children that are directories are returned as Directory objects,
        everything else as File objects.

        Returns:
            Child objects sorted by name.

        Raises:
            NonExistent: If the directory does not exist.
        """
        if not self.exists():
            raise NonExistent()
        with translate_os_errors():
            children = self.fs.iterdir(self._path)
            return [
                Directory(child, filesystem=self.fs)
                if self.fs.object_type(child) is ObjectType.DIRECTORY
                else File(child, filesystem=self.fs)
                for child in children
            ]
