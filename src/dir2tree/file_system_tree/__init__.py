"""Directory traversal, tree values and rendering.

This package provides the traversal engine that turns a directory listing capability
into an ordered, filtered tree of nodes, and the renderer that draws such a tree.
"""

from .renderer import render, stream_tree
from .tree_node import DirTree, TreeCounts, TreeNode, count_nodes, rendered_name
from .walk_options import WalkOptions
from .walker import walk

__all__ = [
    "DirTree",
    "TreeCounts",
    "TreeNode",
    "WalkOptions",
    "count_nodes",
    "render",
    "rendered_name",
    "stream_tree",
    "walk",
]
