from abc import ABC, abstractmethod
from pathlib import PurePath
from typing import List

from dir2tree.types import FsEntry


class FileSystem(ABC):
    """Abstract capability for listing a directory.

    The traversal engine depends only on this one-method contract, so a real disk, an
    in-memory tree, or any other backend can be walked the same way.
    """

    @abstractmethod
    def read_dir(self, path: PurePath) -> List[FsEntry]:
        """List the entries of a directory.

        Implementations must classify every entry as exactly one EntryKind without
        following symbolic links. The order of the returned entries is not significant.

        Args:
            path: The directory to list.

        Returns:
            The entries found in the directory.

        Raises:
            OSError: If the directory cannot be listed (permission denied, not found,
                I/O failure, ...).
        """
        pass
