"""Deterministic directory tree rendering.

This package walks a directory hierarchy, filters and orders its entries, and
renders the result with line-drawing connectors in the spirit of the classic
``tree`` utility.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2tree")
except PackageNotFoundError:
    __version__ = "unknown"
