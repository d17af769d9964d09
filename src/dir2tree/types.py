from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import PurePath
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of entry kinds reported by a directory listing.

    Every entry has exactly one kind. Symbolic links are always reported as
    SYMLINK, whatever their target is.

    Attributes:
        DIRECTORY: Directory
        FILE: Regular file
        SYMLINK: Symbolic link (never followed)
        OTHER: Anything else (sockets, FIFOs, device nodes, ...)
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class FsEntry:
    """A single item returned by a directory listing.

    Attributes:
        path: Locator of the entry, usable for listing it if it is a directory.
        name: Base name of the entry, without any trailing separator.
        kind: The kind of the entry.
    """

    path: PurePath
    name: str
    kind: EntryKind
