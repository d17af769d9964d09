"""Directory listing capabilities consumed by the traversal engine."""

from .base import FileSystem
from .local import LocalFileSystem
from .memory import MemoryFileSystem

__all__ = ["FileSystem", "LocalFileSystem", "MemoryFileSystem"]
