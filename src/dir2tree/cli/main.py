"""Command-line interface for dir2tree.

This module provides the ``dir2tree`` command: it parses the command line, resolves the
root path, walks it and writes the rendered tree, handling signals so that output cut
short by a closed pipe or Ctrl+C ends cleanly.

Exit Codes:
    0: Successful completion (including trees with unreadable subdirectories)
    1: Runtime error (invalid ignore pattern, missing root, unreadable exclusion file, ...)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Tree of a project, two levels deep, without build output
    $ dir2tree -L 2 -I "build|dist|*.pyc" /path/to/project
"""

import os
import stat
import sys
from pathlib import Path
from typing import List, Optional

from dir2tree.cli.argparser import build_walk_options, create_parser
from dir2tree.cli.safe_writer import SafeWriter
from dir2tree.cli.signal_handler import setup_signal_handling, signal_handler
from dir2tree.dir2tree import StreamingDir2Tree, root_display_name
from dir2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dir2tree.file_system_tree.walker import describe_error


def format_summary(directories: int, files: int) -> str:
    """Format the entry counts the way the classic tree utility reports them.

    Example:
        >>> format_summary(1, 3)
        '1 directory, 3 files'
        >>> format_summary(0, 1)
        '0 directories, 1 file'
    """
    directory_label = "directory" if directories == 1 else "directories"
    file_label = "file" if files == 1 else "files"
    return f"{directories} {directory_label}, {files} {file_label}"


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the dir2tree command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    setup_signal_handling()

    try:
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args(argv)

        options = build_walk_options(args, None if exclusion_rules.is_empty else exclusion_rules)

        # Compiles the ignore pattern; an invalid one aborts before any output
        analyzer = StreamingDir2Tree(args.path, options=options)

        try:
            metadata = os.lstat(args.path)
        except OSError as e:
            print(f"dir2tree: {args.path}: {describe_error(e)}", file=sys.stderr)
            sys.exit(1)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                if not stat.S_ISDIR(metadata.st_mode):
                    safe_writer.write(f"{root_display_name(Path(args.path))}\n")
                else:
                    for line in analyzer.stream_tree():
                        safe_writer.write(line)

                    if args.summary:
                        summary = format_summary(analyzer.directory_count, analyzer.file_count)
                        if args.summary == "stdout":
                            safe_writer.write(f"\n{summary}\n")
                        else:
                            print(summary, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
