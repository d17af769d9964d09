"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from dir2tree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Paths are matched with the pathspec library in the same way that Git matches them.
    During traversal each entry is checked by its path relative to the walk root, with a
    trailing slash for directories, so directory-only patterns such as ``build/`` apply
    to directories and not to files of the same name.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Rules from several files and individual rules are combined in the order they are
    added, with later rules able to override earlier ones through negation.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("build")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    @property
    def is_empty(self) -> bool:
        """True when no pattern has been loaded or added."""
        return not self.spec.patterns

    def exclude(self, path: str) -> bool:
        """Check if a root-relative path should be excluded.

        Args:
            path: Path relative to the walk root, using forward slashes, with a trailing
                slash for directories.

        Returns:
            bool: True if the last pattern matching the path is not a negation.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.add_rule("!keep.pyc")
            >>> rules.exclude("pkg/mod.pyc")
            True
            >>> rules.exclude("keep.pyc")
            False
        """
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._rebuild()

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern to add (e.g., "*.pyc", "dist/", "!keep.txt").
        """
        self._lines.append(rule)
        self._rebuild()

    def _rebuild(self) -> None:
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
