import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from utils.logger import get_logger

logger = get_logger("events")

# Seconds stop() waits for the reader, above the terminal key read timeout
READER_JOIN_TIMEOUT = 1.0

class SignalType(Enum):
    QUIT = "quit"

@dataclass(frozen=True)
class Input:
    """A key pressed by the user"""
    key: str

@dataclass(frozen=True)
class Signal:
    """Application signal, for now only QUIT"""
    signal: SignalType

QUIT = Signal(SignalType.QUIT)

Event = Union[Input, Signal]

class Events:
    """
    Event channel of the interactive session.

    The session loop is the only consumer. Producers are the optional key
    reader thread and the tables (e.g. the quit command).
    """

    def __init__(self):
        self._queue: "queue.Queue[Event]" = queue.Queue()
        self._reader: Optional[threading.Thread] = None
        self._stopped = threading.Event()

    def send(self, event: Event) -> None:
        self._queue.put(event)

    def next(self, timeout: Optional[float] = None) -> Event:
        """Block until the next event arrives"""
        return self._queue.get(timeout=timeout)

    def start(self, read_key: Callable[[], Optional[str]]) -> None:
        """Start a daemon thread turning blocking key reads into Input events"""
        if self._reader is not None:
            return

        def run():
            while not self._stopped.is_set():
                key = read_key()
                if key is not None:
                    self.send(Input(key))
            logger.debug("Key reader stopped")

        self._reader = threading.Thread(target=run, name="key-reader", daemon=True)
        self._reader.start()

    def stop(self, timeout: float = READER_JOIN_TIMEOUT) -> None:
        """Stop the key reader and wait for its pending read to return"""
        self._stopped.set()
        if self._reader is not None:
            self._reader.join(timeout)
            if self._reader.is_alive():
                logger.warning(f"Key reader still running after {timeout}s")
