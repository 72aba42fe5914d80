"""Base class for work run on a background thread."""

import threading
import time
from abc import ABC, abstractmethod


class Thread(ABC):
    """Runs ``entry`` on a new thread; subclasses supply ``entry``."""

    def __init__(self) -> None:
        self._thread: threading.Thread | None = None

    def run(self) -> None:
        """Start ``entry`` on a new thread."""
        self._thread = threading.Thread(target=self.entry, daemon=True)
        self._thread.start()

    @abstractmethod
    def entry(self) -> None:
        """The work done on the thread."""

    def wait(self) -> None:
        """Block until the thread started by ``run`` has finished."""
        if self._thread is None:
            raise RuntimeError("thread has not been started")
        self._thread.join()

    @staticmethod
    def sleep(ms: int) -> None:
        """Sleep for the given number of milliseconds."""
        time.sleep(ms / 1000)