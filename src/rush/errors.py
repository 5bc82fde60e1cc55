"""Normalized error taxonomy for filesystem operations.

Every fallible operation in rush raises exactly one of the concrete
``FSError`` subclasses below. Raw ``OSError`` instances are translated at
the boundary by ``translate_os_errors`` and never reach callers.
"""

from __future__ import annotations

import errno
import os
from collections.abc import Iterator
from contextlib import contextmanager

from rush.types import ObjectType

__all__ = [
    "AlreadyExists",
    "FSError",
    "NonExistent",
    "PermissionDenied",
    "TypeMismatch",
    "UnknownFSError",
    "map_os_error",
    "translate_os_errors",
]


class FSError(Exception):
    """Base class for all filesystem errors raised by rush."""

    message = "A completely unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    def _payload(self) -> tuple[object, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))


class NonExistent(FSError):
    """The requested object does not exist."""

    message = "The requested object does not exist"


class AlreadyExists(FSError):
    """The requested object already exists."""

    message = "The requested object already exists"


class TypeMismatch(FSError):
    """The path exists but denotes a different kind of object.

    Attributes:
        found: The kind of object actually present at the path.
    """

    def __init__(self, found: ObjectType) -> None:
        self.found = found
        super().__init__(f"Expected a different object type but found a {found}")

    def _payload(self) -> tuple[object, ...]:
        return (self.found,)

    def __repr__(self) -> str:
        return f"TypeMismatch({self.found!r})"


class PermissionDenied(FSError):
    """The caller lacks permissions for this operation."""

    message = "You lack permissions for this operation"


class UnknownFSError(FSError):
    """Any failure that does not fit one of the other kinds.

    Attributes:
        detail: Textual description of the underlying failure.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.message}: {detail}")

    def _payload(self) -> tuple[object, ...]:
        return (self.detail,)

    def __repr__(self) -> str:
        return f"UnknownFSError({self.detail!r})"


def _describe(error: BaseException) -> str:
    code = getattr(error, "errno", None)
    if isinstance(code, int):
        return os.strerror(code)
    return str(error) or type(error).__name__


def map_os_error(error: OSError | ValueError) -> FSError:
    """Map a raw I/O failure to its ``FSError`` kind.

    The mapping is total: anything without a dedicated kind becomes
    ``UnknownFSError`` carrying a description of the raw failure.

    Args:
        error: The exception raised by the underlying filesystem call.

    Returns:
        The corresponding ``FSError`` instance (not raised).
    """
    if isinstance(error, FileExistsError):
        return AlreadyExists()
    if isinstance(error, FileNotFoundError):
        return NonExistent()
    if isinstance(error, PermissionError):
        return PermissionDenied()
    if isinstance(error, IsADirectoryError):
        return TypeMismatch(ObjectType.DIRECTORY)
    # Plain OSError instances built by hand carry only an errno
    code = getattr(error, "errno", None)
    if code == errno.EEXIST:
        return AlreadyExists()
    if code == errno.ENOENT:
        return NonExistent()
    if code in (errno.EACCES, errno.EPERM):
        return PermissionDenied()
    if code == errno.EISDIR:
        return TypeMismatch(ObjectType.DIRECTORY)
    return UnknownFSError(_describe(error))


@contextmanager
def translate_os_errors() -> Iterator[None]:
    """Re-raise raw I/O failures inside the block as ``FSError``.

    ``UnicodeDecodeError`` is translated as well, since reading a file as
    text is part of the I/O surface.

    Raises:
        FSError: The mapped error, chained to the original exception.
    """
    try:
        yield
    except (OSError, UnicodeDecodeError) as e:
        raise map_os_error(e) from e
