"""Exclusion rules for filtering directory entries."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .name_patterns import CompiledPatterns, compile_patterns, glob_to_regex

__all__ = [
    "BaseExclusionRules",
    "CompiledPatterns",
    "GitIgnoreExclusionRules",
    "compile_patterns",
    "glob_to_regex",
]
