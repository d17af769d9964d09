"""Directory listing backed by the operating system."""

import os
from pathlib import Path, PurePath
from typing import List

from dir2tree.types import EntryKind, FsEntry

from .base import FileSystem


def classify(entry: "os.DirEntry[str]") -> EntryKind:
    """Determine the kind of a scandir entry without following symlinks.

    Raises:
        OSError: If the entry's type cannot be determined.
    """
    if entry.is_symlink():
        return EntryKind.SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return EntryKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryKind.FILE
    return EntryKind.OTHER


class LocalFileSystem(FileSystem):
    """List directories on the local disk with ``os.scandir``.

    Entries whose type cannot be determined (for instance because they vanished
    between the listing and the type check) are skipped.

    Example:
        >>> fs = LocalFileSystem()
        >>> entries = fs.read_dir(Path("."))  # doctest: +SKIP
    """

    def read_dir(self, path: PurePath) -> List[FsEntry]:
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    kind = classify(entry)
                except OSError:
                    continue
                entries.append(FsEntry(path=Path(entry.path), name=entry.name, kind=kind))
        return entries
