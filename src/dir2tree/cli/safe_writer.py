"""Signal-aware output writing for the dir2tree command."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dir2tree.cli.signal_handler import signal_handler


class SafeWriter:
    """Write tree lines to a file descriptor or a file, stopping on interruption.

    Text is encoded as UTF-8 and written straight to the descriptor, bypassing
    ``sys.stdout`` buffering, so a closed pipe is noticed at the line that hits it.

    Attributes:
        file: The file descriptor or path given on construction.
        fd: The file descriptor actually written to.
    """

    def __init__(self, file: Union[int, str, "os.PathLike[str]"]):
        """Initialize the writer.

        Args:
            file: A file descriptor (e.g. ``sys.stdout.fileno()``) or a path to create
                or truncate.

        Raises:
            TypeError: If ``file`` is neither an int nor a path.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write ``data`` as UTF-8.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is closed.
            OSError: If any other I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8", "surrogateescape")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it; a broken pipe on close is tolerated."""
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # An exception from the with block takes precedence
            if exc_type is None:
                raise
