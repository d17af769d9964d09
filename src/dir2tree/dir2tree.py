"""Directory tree rendering with streaming support.

This module ties the traversal engine and the renderer together: it walks a root
directory once and streams the root line followed by the rendered tree.
"""

from pathlib import PurePath
from typing import Iterator, Optional

from dir2tree.file_system.base import FileSystem
from dir2tree.file_system.local import LocalFileSystem
from dir2tree.file_system_tree.renderer import format_error, stream_tree
from dir2tree.file_system_tree.tree_node import DirTree, TreeCounts, count_nodes
from dir2tree.file_system_tree.walk_options import WalkOptions
from dir2tree.file_system_tree.walker import TreeWalker
from dir2tree.types import PathType


def root_display_name(root: PathType) -> str:
    """Return the name printed on the first line for ``root``.

    The current directory given as "." is shown as ".", any other path by its base
    name, and a path without a base name (such as "/") as the path itself.

    Example:
        >>> root_display_name(".")
        '.'
        >>> root_display_name("/home/user/project")
        'project'
        >>> root_display_name("/")
        '/'
    """
    path = PurePath(root)
    if str(path) == ".":
        return "."
    return path.name or str(path)


class StreamingDir2Tree:
    """Walk a directory once and stream its rendered tree.

    The ignore pattern is compiled on construction, so an invalid pattern is reported
    before anything is read or written. The walk itself happens lazily on first use.

    Attributes:
        directory (PathType): The root directory.
        options (WalkOptions): Filtering, ordering and depth settings.

    Example:
        >>> from dir2tree.file_system.memory import MemoryFileSystem
        >>> fs = MemoryFileSystem()
        >>> fs.add_file("/work/project/README.md")
        >>> fs.add_file("/work/project/src/main.py")
        >>> tree = StreamingDir2Tree("/work/project", fs=fs)
        >>> for line in tree.stream_tree():
        ...     print(line, end="")
        project
        ├── README.md
        └── src/
            └── main.py
        >>> tree.directory_count, tree.file_count
        (1, 2)

    Raises:
        PatternCompileError: If options.ignore_pattern is invalid.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        options: Optional[WalkOptions] = None,
        fs: Optional[FileSystem] = None,
    ) -> None:
        """Initialize streaming tree rendering.

        Args:
            directory: Root directory to render.
            options: Walk settings. Defaults to WalkOptions().
            fs: Listing capability. Defaults to the local disk.
        """
        self.directory = directory
        self.options = options if options is not None else WalkOptions()
        self._walker = TreeWalker(fs if fs is not None else LocalFileSystem(), self.options)
        self._tree: Optional[DirTree] = None
        self._counts: Optional[TreeCounts] = None

    @property
    def tree(self) -> DirTree:
        if self._tree is None:
            self._tree = self._walker.walk(self.directory)
        return self._tree

    @property
    def root_name(self) -> str:
        return root_display_name(self.directory)

    def stream_tree(self) -> Iterator[str]:
        """Yield the root line and then every tree line, each ending with a newline."""
        tree = self.tree
        suffix = format_error(tree.error) if tree.error is not None else ""
        yield f"{self.root_name}{suffix}\n"
        for line in stream_tree(tree.children):
            yield f"{line}\n"

    @property
    def counts(self) -> TreeCounts:
        if self._counts is None:
            self._counts = count_nodes(self.tree)
        return self._counts

    @property
    def directory_count(self) -> int:
        return self.counts.directories

    @property
    def file_count(self) -> int:
        """Number of non-directory entries shown (files, symlinks and other entries)."""
        return self.counts.non_directories

    @property
    def error_count(self) -> int:
        return self.counts.errors
