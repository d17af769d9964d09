"""Signal handling for the dir2tree command.

A tree printed into a pipe is often cut short (``dir2tree | head``) or interrupted
with Ctrl+C. The handlers here only record that this happened, so that the writer can
stop and the command can exit with the conventional status.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, NamedTuple, Optional


class WatchedSignal(NamedTuple):
    """How one watched signal is recorded and reported."""

    received: Event
    previous_handler: Any
    exit_code: int


class SignalHandler:
    """Records SIGPIPE and SIGINT deliveries.

    A delivery sets the signal's event and reinstates the handler that was active
    when this object was created, so a second delivery gets the previous behavior.
    SIGPIPE is listed first and wins when both signals arrive.

    Attributes:
        sigpipe_received: Set once SIGPIPE has been delivered.
        sigint_received: Set once SIGINT has been delivered.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.watched: Dict[int, WatchedSignal] = {
            signal.SIGPIPE: WatchedSignal(self.sigpipe_received, signal.getsignal(signal.SIGPIPE), 141),
            signal.SIGINT: WatchedSignal(self.sigint_received, signal.getsignal(signal.SIGINT), 130),
        }

    @property
    def interrupted(self) -> bool:
        return any(entry.received.is_set() for entry in self.watched.values())

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        entry = self.watched[signum]
        entry.received.set()
        signal.signal(signum, entry.previous_handler)

    def install(self) -> None:
        for signum in self.watched:
            signal.signal(signum, self.handle)

    def exit_code(self) -> Optional[int]:
        """Return 141 after SIGPIPE, 130 after SIGINT, None if neither was received."""
        for entry in self.watched.values():
            if entry.received.is_set():
                return entry.exit_code
        return None


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    signal_handler.install()


def cleanup() -> None:
    """Point stdout at the null device once an interruption was recorded.

    Runs at interpreter exit, where flushing a closed pipe would otherwise report
    a second broken pipe.
    """
    if not signal_handler.interrupted:
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
