"""Command-line argument parsing for dir2tree.

This module defines the command-line interface for dir2tree and turns the parsed
arguments into WalkOptions.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dir2tree import __version__
from dir2tree.exclusion_rules.base_rules import BaseExclusionRules
from dir2tree.file_system_tree.walk_options import WalkOptions


def positive_int(value: str) -> int:
    """argparse type for -L: a strictly positive integer."""
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level: {value!r}")
    if level < 1:
        raise argparse.ArgumentTypeError(f"invalid level: {value!r}, must be greater than 0")
    return level


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class that loads exclusion files into ``exclusion_rules``.

    Files are loaded as soon as their option is parsed, so several ``-e`` options are
    combined in the order they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            rules_file = values if isinstance(values, (str, os.PathLike)) else Path(str(values))
            exclusion_rules.load_rules(rules_file)

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object filled from -e/--exclude options.

    Returns:
        An ArgumentParser instance configured with dir2tree's options.
    """
    description = """
    dir2tree: print a deterministic directory tree.

    Entries are listed depth-first with line-drawing connectors. Directories are shown
    with a trailing slash and entries are ordered by that displayed name, byte by byte.
    Symbolic links are shown as leaves and never followed. A directory that cannot be
    read is shown with an inline [error: ...] annotation and the rest of the tree is
    still printed.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      dir2tree

      # Only two levels, directories before files
      dir2tree -L 2 --dirsfirst /path/to/project

      # Ignore entries by name (pipe-separated, * and ? wildcards)
      dir2tree -I "node_modules|.git|*.log" /path/to/project

      # Only directories
      dir2tree -d /path/to/project

      # Apply .gitignore-style exclusion files (can be repeated)
      dir2tree -e .gitignore /path/to/project

      # Write to a file and report counts on stderr
      dir2tree -o tree.txt -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dir2tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2tree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Root path to print (default: the current directory).",
    )
    parser.add_argument(
        "-L",
        dest="max_depth",
        type=positive_int,
        metavar="LEVEL",
        help="Descend only LEVEL directories deep; 1 lists the root's entries only.",
    )
    parser.add_argument(
        "-I",
        dest="ignore_pattern",
        metavar="PATTERN",
        help=(
            'Do not list entries whose name matches PATTERN. Segments are separated by "|", '
            'e.g. "node_modules|.git|*.log"; * and ? are wildcards.'
        ),
    )
    parser.add_argument(
        "-a",
        dest="all",
        action="store_true",
        help="Show all entries, including hidden ones (already the default).",
    )
    parser.add_argument(
        "-d",
        dest="dirs_only",
        action="store_true",
        help="List directories only.",
    )
    parser.add_argument(
        "--dirsfirst",
        dest="dirs_first",
        action="store_true",
        help="List directories before files.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Exclusion file with .gitignore-style patterns, matched against paths relative to the root "
        "(can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stdout", "stderr"],
        help="Print a directory and file count after the tree. Valid destinations: stdout (with the tree), stderr.",
    )

    return parser


def build_walk_options(args: argparse.Namespace, exclusion_rules: Optional[BaseExclusionRules] = None) -> WalkOptions:
    """Translate parsed arguments into WalkOptions.

    Hidden entries are shown whether or not -a was given; -a only states it explicitly.
    """
    return WalkOptions(
        max_depth=args.max_depth,
        ignore_pattern=args.ignore_pattern,
        show_hidden=True,
        dirs_only=args.dirs_only,
        dirs_first=args.dirs_first,
        exclusion_rules=exclusion_rules,
    )
