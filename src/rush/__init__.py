"""Typed, uniform operations on filesystem objects."""

__version__ = "0.1.0"

from rush.errors import (
    AlreadyExists,
    FSError,
    NonExistent,
    PermissionDenied,
    TypeMismatch,
    UnknownFSError,
)
from rush.objects import Directory, File, object_for_path
from rush.protocols import FileSystem, FilesystemObject
from rush.types import ObjectType, classify

__all__ = [
    "__version__",
    "AlreadyExists",
    "Directory",
    "File",
    "FileSystem",
    "FilesystemObject",
    "FSError",
    "NonExistent",
    "ObjectType",
    "PermissionDenied",
    "TypeMismatch",
    "UnknownFSError",
    "classify",
    "object_for_path",
]
