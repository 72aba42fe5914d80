"""Fixed-capacity circular buffer."""

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RingBufferOverflow(Exception):
    """Raised when data does not fit; the buffer is cleared before raising."""


class RingBufferUnderflow(Exception):
    """Raised when more items are requested than the buffer holds."""


class RingBuffer(Generic[T]):
    """A circular buffer of fixed length.

    One slot always stays free, so at most ``length - 1`` items are held.
    """

    def __init__(self, length: int, name: str) -> None:
        if length <= 0:
            raise ValueError("length must be positive")
        if not name:
            raise ValueError("name must not be empty")
        self._length = length
        self._name = name
        self._buffer: list = [0] * length
        self._in = 0
        self._out = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def length(self) -> int:
        return self._length

    def add_data(self, data: Sequence[T]) -> None:
        """Append items; on overflow the buffer is cleared and an error raised."""
        count = len(data)
        free = self.free_space()
        if count >= free:
            message = f"{self._name} buffer overflow, clearing the buffer. ({count} >= {free})"
            logger.error(message)
            self.clear()
            raise RingBufferOverflow(message)
        for item in data:
            self._buffer[self._in] = item
            self._in = (self._in + 1) % self._length

    def _read(self, count: int, start: int) -> list:
        return [self._buffer[(start + i) % self._length] for i in range(count)]

    def _check_available(self, count: int, action: str) -> None:
        size = self.data_size()
        if size < count:
            message = f"**** Underflow{action} in {self._name} ring buffer, {size} < {count}"
            logger.error(message)
            raise RingBufferUnderflow(message)

    def get_data(self, count: int) -> list:
        """Remove and return the oldest ``count`` items."""
        self._check_available(count, "")
        items = self._read(count, self._out)
        self._out = (self._out + count) % self._length
        return items

    def peek(self, count: int) -> list:
        """Return the oldest ``count`` items without removing them."""
        self._check_available(count, " peek")
        return self._read(count, self._out)

    def clear(self) -> None:
        self._in = 0
        self._out = 0
        self._buffer = [0] * self._length

    def free_space(self) -> int:
        if self._out > self._in:
            return self._out - self._in
        if self._in > self._out:
            return self._length - (self._in - self._out)
        return self._length

    def data_size(self) -> int:
        return self._length - self.free_space()

    def has_space(self, length: int) -> bool:
        return self.free_space() > length

    def has_data(self) -> bool:
        return self._out != self._in

    def is_empty(self) -> bool:
        return self._out == self._in

    def __len__(self) -> int:
        return self.data_size()