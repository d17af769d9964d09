"""Tree values produced by the traversal engine."""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from anytree import Node, NodeMixin

from dir2tree.types import EntryKind


def rendered_name(name: str, kind: EntryKind) -> str:
    """Return the display name of an entry: directories get a trailing slash.

    Example:
        >>> rendered_name("src", EntryKind.DIRECTORY)
        'src/'
        >>> rendered_name("link", EntryKind.SYMLINK)
        'link'
    """
    if kind is EntryKind.DIRECTORY:
        return f"{name}/"
    return name


class TreeNode(Node):  # type: ignore
    """Node class representing one filtered, ordered entry of the tree.

    Extends anytree.Node with the entry kind and an optional listing error. A node
    whose directory could not be listed carries the error message and has no children.

    Attributes:
        name (str): The rendered name (trailing slash for directories).
        kind (EntryKind): The kind of the underlying entry.
        error (Optional[str]): Listing error for this directory, if any.
        children (tuple[TreeNode]): Child nodes, in display order.

    Example:
        >>> node = TreeNode("src/", kind=EntryKind.DIRECTORY, children=[TreeNode("main.py")])
        >>> [child.name for child in node.children]
        ['main.py']
        >>> node.children[0].kind
        <EntryKind.FILE: 'file'>
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        kind: EntryKind = EntryKind.FILE,
        error: Optional[str] = None,
        children: Optional[Iterable["TreeNode"]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, children, **kwargs)
        self.kind = kind
        self.error = error

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


class DirTree(NodeMixin):  # type: ignore
    """Result of listing the walk root.

    Attributes:
        error (Optional[str]): Why the root itself could not be listed, if it could not.
        children (tuple[TreeNode]): Top-level nodes, in display order.
    """

    def __init__(self, error: Optional[str] = None, children: Optional[Iterable[TreeNode]] = None) -> None:
        super().__init__()
        self.error = error
        if children:
            self.children = children

    def __repr__(self) -> str:
        return f"DirTree(error={self.error!r}, children={len(self.children)})"


@dataclass
class TreeCounts:
    """Totals over every node of a tree (the root itself is not counted)."""

    directories: int = 0
    files: int = 0
    symlinks: int = 0
    others: int = 0
    errors: int = 0

    @property
    def non_directories(self) -> int:
        return self.files + self.symlinks + self.others


def count_nodes(tree: DirTree) -> TreeCounts:
    """Count the directories, files, symlinks, other entries and listing errors of a tree.

    Example:
        >>> tree = DirTree(children=[TreeNode("a/", kind=EntryKind.DIRECTORY), TreeNode("b")])
        >>> count_nodes(tree)
        TreeCounts(directories=1, files=1, symlinks=0, others=0, errors=0)
    """
    counts = TreeCounts()
    # Explicit stack: trees may be deeper than the interpreter recursion limit
    stack = list(tree.children)
    while stack:
        node = stack.pop()
        stack.extend(node.children)
        if node.kind is EntryKind.DIRECTORY:
            counts.directories += 1
        elif node.kind is EntryKind.SYMLINK:
            counts.symlinks += 1
        elif node.kind is EntryKind.OTHER:
            counts.others += 1
        else:
            counts.files += 1
        if node.error is not None:
            counts.errors += 1
    return counts
