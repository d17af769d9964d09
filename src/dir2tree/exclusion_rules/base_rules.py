from abc import ABC, abstractmethod
from typing import Sequence, Union

from dir2tree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    This class is the contract shared by the rule types used during traversal: the
    pipe-separated name patterns given with ``-I`` and the .gitignore-style rules loaded
    from exclusion files. All implementations decide whether a given string should be
    excluded. File loading and individual rule addition are optional capabilities that
    depend on the rule type.

    Example:
        >>> from dir2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.pyc')
        >>> git_rules.exclude('test.pyc')
        True
        >>> from dir2tree.exclusion_rules.name_patterns import compile_patterns
        >>> patterns = compile_patterns('node_modules|*.log')
        >>> patterns.exclude('debug.log')
        True
        >>> # patterns.load_rules('file.txt')  # Would raise NotImplementedError
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if the given string should be excluded based on the loaded rules.

        Args:
            path (str): What to check. Name-based rules receive an entry's base name;
                path-based rules receive the entry's path relative to the walk root.

        Returns:
            bool: True if the entry should be excluded, False if it should be kept.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
