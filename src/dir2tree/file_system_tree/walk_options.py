"""Options controlling a directory walk."""

from dataclasses import dataclass
from typing import Optional

from dir2tree.exclusion_rules.base_rules import BaseExclusionRules


@dataclass(frozen=True)
class WalkOptions:
    """Immutable configuration for one walk.

    Attributes:
        max_depth: Number of levels to list below the root. 1 lists the root's children
            only, 2 additionally lists their children, and so on. None means unbounded.
        ignore_pattern: Pipe-separated name patterns to drop, e.g. "node_modules|*.log".
        show_hidden: Keep entries whose name starts with a dot. Defaults to True.
        dirs_only: Drop every entry that is not a directory.
        dirs_first: Order directories before all other entries.
        exclusion_rules: Optional path-based rules (e.g. .gitignore patterns), matched
            against each entry's path relative to the root.

    Example:
        >>> WalkOptions(max_depth=2).show_hidden
        True
        >>> WalkOptions(max_depth=0)
        Traceback (most recent call last):
        ...
        ValueError: max_depth must be a positive integer, got 0
    """

    max_depth: Optional[int] = None
    ignore_pattern: Optional[str] = None
    show_hidden: bool = True
    dirs_only: bool = False
    dirs_first: bool = False
    exclusion_rules: Optional[BaseExclusionRules] = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth}")

    def may_descend(self, depth: int) -> bool:
        """Return True if a directory found at ``depth`` may be listed."""
        return self.max_depth is None or depth + 1 < self.max_depth
