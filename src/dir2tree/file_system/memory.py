"""In-memory directory listing capability.

MemoryFileSystem holds a fixed hierarchy of entries and answers listings
deterministically, which makes it suitable for tests and for rendering trees that do
not live on disk. Listing failures can be simulated per directory.
"""

import errno
from pathlib import PurePath, PurePosixPath
from typing import Dict, List, Union

from dir2tree.types import EntryKind, FsEntry

from .base import FileSystem

MemoryPath = Union[str, PurePath]


class MemoryFileSystem(FileSystem):
    """A directory hierarchy kept entirely in memory.

    Paths are POSIX-style. Adding an entry creates any missing parent directories.

    Attributes:
        calls (List[str]): Every path passed to read_dir, in call order.

    Example:
        >>> fs = MemoryFileSystem()
        >>> fs.add_file("/root/a.txt")
        >>> fs.add_dir("/root/src")
        >>> sorted(entry.name for entry in fs.read_dir(PurePosixPath("/root")))
        ['a.txt', 'src']
        >>> fs.fail("/root/src", "Permission denied")
        >>> fs.read_dir(PurePosixPath("/root/src"))
        Traceback (most recent call last):
        ...
        OSError: Permission denied
    """

    def __init__(self) -> None:
        self._children: Dict[PurePosixPath, Dict[str, EntryKind]] = {}
        self._failures: Dict[PurePosixPath, str] = {}
        self.calls: List[str] = []

    @staticmethod
    def _normalize(path: MemoryPath) -> PurePosixPath:
        return PurePosixPath(str(path))

    def _add(self, path: MemoryPath, kind: EntryKind) -> None:
        entry_path = self._normalize(path)
        # Outermost first, so each new directory is registered in its existing parent
        for directory in reversed(entry_path.parents):
            if directory not in self._children:
                self._children[directory] = {}
                if directory.parent != directory:
                    self._children[directory.parent][directory.name] = EntryKind.DIRECTORY
        parent = entry_path.parent
        if parent != entry_path:
            self._children[parent][entry_path.name] = kind
        if kind is EntryKind.DIRECTORY:
            self._children.setdefault(entry_path, {})

    def add_dir(self, path: MemoryPath) -> None:
        """Add a directory, creating missing parents. Adding an existing one is a no-op."""
        entry_path = self._normalize(path)
        if entry_path in self._children:
            return
        self._add(entry_path, EntryKind.DIRECTORY)

    def add_file(self, path: MemoryPath) -> None:
        self._add(path, EntryKind.FILE)

    def add_symlink(self, path: MemoryPath) -> None:
        self._add(path, EntryKind.SYMLINK)

    def add_other(self, path: MemoryPath) -> None:
        self._add(path, EntryKind.OTHER)

    def fail(self, path: MemoryPath, message: str) -> None:
        """Make every listing of ``path`` raise an OSError carrying ``message``."""
        self._failures[self._normalize(path)] = message

    def read_dir(self, path: PurePath) -> List[FsEntry]:
        dir_path = self._normalize(path)
        self.calls.append(str(dir_path))

        if dir_path in self._failures:
            raise OSError(self._failures[dir_path])
        if dir_path not in self._children:
            parent_listing = self._children.get(dir_path.parent, {})
            if dir_path.name in parent_listing:
                raise NotADirectoryError(errno.ENOTDIR, "Not a directory", str(dir_path))
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(dir_path))

        return [
            FsEntry(path=dir_path / name, name=name, kind=kind) for name, kind in self._children[dir_path].items()
        ]
