"""
Player commands and the input path that feeds them to the tick loop.

Raw tokens are queued as typed; the tick thread drains the queue in FIFO
order and parses each token when it is applied.
"""

import logging
import queue
import threading
from enum import Enum
from typing import IO, List, Optional

logger = logging.getLogger(__name__)


class Command(Enum):
    """The closed set of commands the simulation understands."""
    MOVE_LEFT = "move-left"
    MOVE_RIGHT = "move-right"
    MOVE_UP = "move-up"
    MOVE_DOWN = "move-down"
    SHOOT = "shoot"
    QUIT = "quit"
    QUERY_HELP = "query-help"
    QUERY_STATS = "query-stats"


_ALIASES = {
    "a": Command.MOVE_LEFT,
    "left": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    "right": Command.MOVE_RIGHT,
    "w": Command.MOVE_UP,
    "up": Command.MOVE_UP,
    "s": Command.MOVE_DOWN,
    "down": Command.MOVE_DOWN,
    "space": Command.SHOOT,
    "fire": Command.SHOOT,
    "q": Command.QUIT,
    "exit": Command.QUIT,
    "help": Command.QUERY_HELP,
    "?": Command.QUERY_HELP,
    "h": Command.QUERY_HELP,
    "stats": Command.QUERY_STATS,
}


def parse_command(token: str) -> Optional[Command]:
    """
    Map a raw input token to a Command.

    Accepts the canonical names (e.g. "move-left") and keyboard aliases
    (e.g. "a"). Matching is case-insensitive.

    Returns:
        The command, or None if the token is not recognized
    """
    if token == " ":
        return Command.SHOOT
    normalized = token.strip().lower()
    try:
        return Command(normalized)
    except ValueError:
        return _ALIASES.get(normalized)


class CommandQueue:
    """Thread-safe FIFO of raw command tokens."""

    def __init__(self):
        self._queue: "queue.Queue[str]" = queue.Queue()

    def put(self, token: str) -> None:
        self._queue.put(token)

    def drain(self) -> List[str]:
        """Remove and return every queued token, oldest first."""
        tokens: List[str] = []
        while True:
            try:
                tokens.append(self._queue.get_nowait())
            except queue.Empty:
                return tokens

    def __len__(self) -> int:
        return self._queue.qsize()


class InputListener:
    """
    Background reader that pushes each input line onto a CommandQueue.

    Runs as a daemon thread; it stops at end of input or after stop() is
    called and the current blocking read returns.
    """

    def __init__(self, command_queue: CommandQueue, stream: IO[str]):
        self.command_queue = command_queue
        self.stream = stream
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()

    def start(self) -> None:
        """Start the background reader thread."""
        if self._thread is not None and self._thread.is_alive():
            self._stop_event.clear()
            return  # Already running

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._read_loop,
            name="InputListener",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: float = 0.5) -> None:
        """Signal the reader to stop and wait briefly for it."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            # A reader still blocked in readline() is kept so start() reuses it
            if not self._thread.is_alive():
                self._thread = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _read_loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                line = self.stream.readline()
            except (OSError, ValueError):
                logger.debug("Input stream closed")
                break

            if line == "":
                break  # EOF
            if self._stop_event.is_set():
                break

            token = line.rstrip("\r\n")
            if token.strip() == "":
                continue
            self.command_queue.put(token.strip())
