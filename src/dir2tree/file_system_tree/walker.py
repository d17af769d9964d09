"""Depth-first traversal that turns directory listings into a tree of nodes.

The walker lists a directory through a FileSystem capability, filters the entries,
orders them by rendered name and descends into subdirectories while the depth limit
allows. A directory that cannot be listed becomes a childless node annotated with the
error message; the rest of the tree is unaffected.
"""

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import List, Optional, Tuple

from dir2tree.exclusion_rules.name_patterns import CompiledPatterns, compile_patterns
from dir2tree.file_system.base import FileSystem
from dir2tree.file_system_tree.tree_node import DirTree, TreeNode, rendered_name
from dir2tree.file_system_tree.walk_options import WalkOptions
from dir2tree.types import EntryKind, FsEntry, PathType


def describe_error(error: OSError) -> str:
    """Return the message recorded for a failed listing.

    Example:
        >>> describe_error(PermissionError(13, "Permission denied", "/root/secret"))
        'Permission denied'
        >>> describe_error(OSError("device not ready"))
        'device not ready'
    """
    return error.strerror or str(error)


def sort_key(name: str) -> bytes:
    """Byte-order sort key for a rendered name."""
    return name.encode("utf-8", "surrogateescape")


class TreeWalker:
    """Build a DirTree for a root directory.

    The ignore pattern is compiled once when the walker is created, so an invalid
    pattern fails before any directory is read. The compiled matcher is then shared
    read-only by every step of the walk.

    Attributes:
        fs (FileSystem): The listing capability.
        options (WalkOptions): Filtering, ordering and depth settings.
        patterns (Optional[CompiledPatterns]): The compiled ignore pattern, if any.

    Example:
        >>> from dir2tree.file_system.memory import MemoryFileSystem
        >>> fs = MemoryFileSystem()
        >>> fs.add_file("/root/b.txt")
        >>> fs.add_file("/root/a/inner.txt")
        >>> tree = TreeWalker(fs, WalkOptions()).walk("/root")
        >>> [node.name for node in tree.children]
        ['a/', 'b.txt']
    """

    def __init__(self, fs: FileSystem, options: Optional[WalkOptions] = None) -> None:
        """Initialize a TreeWalker.

        Args:
            fs: The capability used to list directories.
            options: Walk settings. Defaults to WalkOptions().

        Raises:
            PatternCompileError: If options.ignore_pattern cannot be compiled.
        """
        self.fs = fs
        self.options = options if options is not None else WalkOptions()
        self.patterns: Optional[CompiledPatterns] = None
        if self.options.ignore_pattern is not None:
            self.patterns = compile_patterns(self.options.ignore_pattern)

    def walk(self, root: PathType) -> DirTree:
        """List ``root`` and, recursively, its subdirectories.

        Never raises for listing failures: a failure to list the root is reported in
        the returned DirTree's error, failures deeper down in the failing node's error.
        """
        error, children = self._walk_dir(PurePath(root))
        return DirTree(error=error, children=children)

    def _keep(self, entry: FsEntry, relative_path: str) -> bool:
        if not self.options.show_hidden and entry.name.startswith("."):
            return False
        if self.patterns is not None and self.patterns.matches(entry.name):
            return False
        if self.options.dirs_only and entry.kind is not EntryKind.DIRECTORY:
            return False
        rules = self.options.exclusion_rules
        if rules is not None and rules.exclude(relative_path):
            return False
        return True

    def _order(self, entries: List[Tuple[str, FsEntry]]) -> List[Tuple[str, FsEntry]]:
        if self.options.dirs_first:
            return sorted(entries, key=lambda item: (item[1].kind is not EntryKind.DIRECTORY, sort_key(item[0])))
        return sorted(entries, key=lambda item: sort_key(item[0]))

    def _list(self, path: PurePath, relative_dir: str) -> Tuple[Optional[str], List[Tuple[str, FsEntry]]]:
        """List one directory and return (error message or None, kept entries in display order).

        Args:
            path: Locator of the directory to list.
            relative_dir: Path of the directory relative to the root, with a trailing
                slash, or "" for the root.
        """
        try:
            entries = self.fs.read_dir(path)
        except OSError as e:
            return describe_error(e), []

        kept = []
        for entry in entries:
            name = rendered_name(entry.name, entry.kind)
            if self._keep(entry, relative_dir + name):
                kept.append((name, entry))
        return None, self._order(kept)

    def _walk_dir(self, path: PurePath) -> Tuple[Optional[str], List[TreeNode]]:
        """Build the nodes below ``path`` depth-first, without recursion.

        Each open directory is a frame on an explicit stack. A directory's node is
        created once all of its children are complete and is then appended to the
        enclosing frame, so arbitrarily deep trees do not exhaust the interpreter stack.

        Returns:
            A pair of (error message or None, ordered child nodes).
        """
        error, entries = self._list(path, "")
        root = _DirFrame(entries=entries, relative_dir="", depth=0)
        stack = [root]

        while stack:
            frame = stack[-1]
            if frame.index == len(frame.entries):
                stack.pop()
                if stack:
                    stack[-1].nodes.append(
                        TreeNode(frame.name, kind=EntryKind.DIRECTORY, error=frame.error, children=frame.nodes)
                    )
                continue

            name, entry = frame.entries[frame.index]
            frame.index += 1

            # Symlinks and other non-directories are always leaves
            if entry.kind is EntryKind.DIRECTORY and self.options.may_descend(frame.depth):
                relative_dir = frame.relative_dir + name
                child_error, child_entries = self._list(entry.path, relative_dir)
                stack.append(
                    _DirFrame(
                        entries=child_entries,
                        relative_dir=relative_dir,
                        depth=frame.depth + 1,
                        name=name,
                        error=child_error,
                    )
                )
            else:
                frame.nodes.append(TreeNode(name, kind=entry.kind))

        return error, root.nodes


@dataclass
class _DirFrame:
    """A directory whose entries are still being turned into nodes.

    ``depth`` is the depth of this directory's entries; the root's entries are at 0.
    """

    entries: List[Tuple[str, FsEntry]]
    relative_dir: str
    depth: int
    name: str = ""
    error: Optional[str] = None
    index: int = 0
    nodes: List[TreeNode] = field(default_factory=list)


def walk(fs: FileSystem, root: PathType, options: Optional[WalkOptions] = None) -> DirTree:
    """Walk ``root`` through ``fs`` and return the resulting tree.

    Raises:
        PatternCompileError: If the ignore pattern is invalid. Nothing is read in that case.
    """
    return TreeWalker(fs, options).walk(root)
