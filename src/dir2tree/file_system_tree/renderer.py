"""Line-drawing rendering of a tree of nodes.

Rendering is a pure function of the nodes it is given: it never touches the filesystem
and its output depends only on the names, errors and structure of the tree.
"""

from typing import Iterator, List, Sequence, Tuple

from dir2tree.file_system_tree.tree_node import TreeNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def format_error(error: str) -> str:
    return f" [error: {error}]"


def stream_tree(children: Sequence[TreeNode]) -> Iterator[str]:
    """Generate the tree lines for ``children`` one at a time, without line terminators.

    Each line is one prefix block per ancestor level (a pipe while that ancestor still
    has siblings to come, blanks otherwise), the node's own connector, its rendered
    name and, for nodes that failed to list, an inline error annotation.

    Example:
        >>> from dir2tree.types import EntryKind
        >>> nodes = [
        ...     TreeNode("a"),
        ...     TreeNode("c/", kind=EntryKind.DIRECTORY, children=[TreeNode("d")]),
        ... ]
        >>> for line in stream_tree(nodes):
        ...     print(line)
        ├── a
        └── c/
            └── d
    """
    stack: List[Tuple[Sequence[TreeNode], int, str]] = [(children, 0, "")]
    while stack:
        nodes, index, prefix = stack.pop()
        if index >= len(nodes):
            continue
        node = nodes[index]
        is_last = index == len(nodes) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        suffix = format_error(node.error) if node.error is not None else ""

        yield f"{prefix}{connector}{node.name}{suffix}"

        # Siblings resume after the whole subtree has been written
        stack.append((nodes, index + 1, prefix))
        if node.children:
            stack.append((node.children, 0, prefix + (SPACE if is_last else PIPE)))


def render(children: Sequence[TreeNode]) -> str:
    """Render ``children`` as a string with one newline-terminated line per node.

    Example:
        >>> render([TreeNode("a"), TreeNode("b/", error="Permission denied")])
        '├── a\\n└── b/ [error: Permission denied]\\n'
    """
    return "".join(f"{line}\n" for line in stream_tree(children))
