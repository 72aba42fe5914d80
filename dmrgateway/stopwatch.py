"""Millisecond stopwatch based on the monotonic clock."""

import time


class StopWatch:
    """Measures elapsed milliseconds from a start point."""

    def __init__(self) -> None:
        self._start_ms = 0

    @staticmethod
    def _monotonic_ms() -> int:
        return time.monotonic_ns() // 1_000_000

    def time(self) -> int:
        """Current wall-clock time in milliseconds since the epoch."""
        return time.time_ns() // 1_000_000

    def start(self) -> int:
        """Record and return the start point in monotonic milliseconds."""
        self._start_ms = self._monotonic_ms()
        return self._start_ms

    def elapsed(self) -> int:
        """Milliseconds since the last start."""
        return self._monotonic_ms() - self._start_ms