"""Regular files on the filesystem."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from rush.errors import AlreadyExists, NonExistent, translate_os_errors
from rush.objects.base import BaseObject
from rush.types import ObjectType

logger = logging.getLogger(__name__)


class File(BaseObject):
    """A regular file (not a symbolic link) on the filesystem.

    Content operations work on the whole file at once and do not create
    missing parent directories; use ``create_on_fs_recursive`` first when
    the parents may be absent.
    """

    OBJECT_TYPE: ClassVar[ObjectType] = ObjectType.FILE

    def _create(self) -> None:
        self.fs.write_text(self._path, "")

    def _delete(self) -> None:
        self.fs.unlink(self._path)

    def _delete_recursive(self) -> None:
        self.fs.unlink(self._path)

    def _copy(self, target: Path) -> None:
        self.fs.copyfile(self._path, target)

    def _is_empty(self) -> bool:
        return self.fs.size(self._path) == 0

    def write_new(self, content: str) -> None:
        """Write content to a new file.

        Args:
            content: Full content of the file.

        Raises:
            AlreadyExists: If the file already exists.
            TypeMismatch: If the path exists as a different kind of object.
        """
        logger.debug("Creating new file %s with content", self)
        if self.exists():
            raise AlreadyExists()
        with translate_os_errors():
            self.fs.create_text(self._path, content)

    def append(self, content: str) -> None:
        """Append content to the file, creating it if it does not exist yet.

        Args:
            content: Content to append.
        """
        logger.debug("Appending content to %s", self)
        self.exists()
        with translate_os_errors():
            self.fs.append_text(self._path, content)

    def overwrite(self, content: str) -> None:
        """Replace the file's content, creating the file if it does not exist yet.

        Args:
            content: New full content of the file.
        """
        logger.debug("Overwriting contents of %s", self)
        self.exists()
        with translate_os_errors():
            self.fs.write_text(self._path, content)

    def read(self) -> str:
        """Read the whole file as text.

        Returns:
            The file's content.

        Raises:
            NonExistent: If the file does not exist.
        """
        if not self.exists():
            raise NonExistent()
        with translate_os_errors():
            return self.fs.read_text(self._path)

    def size(self) -> int:
        """Get the size of the file in bytes.

        This is a best-effort query: if the size cannot be determined, for
        example because the file does not exist, 0 is returned instead of
        raising.
        """
        try:
            return self.fs.size(self._path)
        except OSError:
            return 0
