"""Compilation of pipe-separated ignore patterns into a name matcher.

An ignore pattern is a list of segments separated by ``|``. Whitespace around each
segment is ignored and empty segments are dropped. Segments without wildcards are
matched by exact string equality; segments containing ``*`` (any run of characters,
possibly empty) or ``?`` (exactly one character) are translated to anchored regular
expressions and merged into a single compiled matcher. Every other character in a
glob segment is matched literally.
"""

import re
from typing import FrozenSet, Optional, Pattern

from dir2tree.exceptions import PatternCompileError

from .base_rules import BaseExclusionRules

SEGMENT_SEPARATOR = "|"
WILDCARDS = ("*", "?")


def glob_to_regex(segment: str) -> str:
    """Translate a single glob segment into an anchored regular expression.

    Args:
        segment: A trimmed ignore-pattern segment containing ``*`` and/or ``?``.

    Returns:
        The regular expression source. It is anchored at both ends and is meant to be
        compiled with ``re.DOTALL``.

    Example:
        >>> glob_to_regex("*.log")
        '\\\\A.*\\\\.log\\\\Z'
        >>> glob_to_regex("file?.txt")
        '\\\\Afile.\\\\.txt\\\\Z'
    """
    parts = [r"\A"]
    for char in segment:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    parts.append(r"\Z")
    return "".join(parts)


class CompiledPatterns(BaseExclusionRules):
    """Name matcher built once from an ignore pattern and shared read-only afterwards.

    Attributes:
        literals (FrozenSet[str]): Segments without wildcards, matched exactly.
        matcher (Optional[Pattern[str]]): One compiled expression covering every glob
            segment, or None when the pattern had no glob segments.

    Example:
        >>> patterns = compile_patterns("node_modules | *.log")
        >>> patterns.matches("node_modules")
        True
        >>> patterns.matches("debug.log")
        True
        >>> patterns.matches("main.rs")
        False
    """

    def __init__(self, literals: FrozenSet[str], matcher: Optional[Pattern[str]] = None) -> None:
        self.literals = literals
        self.matcher = matcher

    def matches(self, name: str) -> bool:
        """Return True if ``name`` equals a literal segment or matches a glob segment."""
        if name in self.literals:
            return True
        if self.matcher is not None:
            return self.matcher.match(name) is not None
        return False

    def exclude(self, path: str) -> bool:
        return self.matches(path)

    def __repr__(self) -> str:
        pattern = self.matcher.pattern if self.matcher is not None else None
        return f"CompiledPatterns(literals={sorted(self.literals)!r}, matcher={pattern!r})"


def compile_patterns(pattern: str) -> CompiledPatterns:
    """Compile a pipe-separated ignore pattern.

    Args:
        pattern: The raw ignore pattern, e.g. ``"node_modules|.git|*.log"``.

    Returns:
        The compiled matcher. A pattern made only of separators and whitespace yields a
        matcher that matches nothing.

    Raises:
        PatternCompileError: If the combined glob expression fails to compile. The error
            carries the raw pattern string.
    """
    literals = set()
    expressions = []

    for raw_segment in pattern.split(SEGMENT_SEPARATOR):
        segment = raw_segment.strip()
        if not segment:
            continue

        if any(wildcard in segment for wildcard in WILDCARDS):
            expressions.append(glob_to_regex(segment))
        else:
            literals.add(segment)

    matcher = None
    if expressions:
        combined = "|".join(f"(?:{expression})" for expression in expressions)
        try:
            matcher = re.compile(combined, re.DOTALL)
        except re.error as e:
            raise PatternCompileError(pattern, str(e)) from e

    return CompiledPatterns(frozenset(literals), matcher)
