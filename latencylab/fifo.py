"""Bounded circular FIFO queues."""

from __future__ import annotations

import queue
from typing import Any

__all__ = ["Fifo", "SpscFifo"]


class Fifo:
    """Bounded ring-buffer FIFO; not safe for concurrent use.

    ``push`` raises :class:`queue.Full` when full and ``pop`` raises
    :class:`queue.Empty` when empty.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._ring: list[Any] = [None] * capacity
        self._push_cursor = 0
        self._pop_cursor = 0

    def __len__(self) -> int:
        return self._push_cursor - self._pop_cursor

    def capacity(self) -> int:
        """Return the number of elements the queue can hold."""
        return self._capacity

    def empty(self) -> bool:
        """Return whether the queue holds no elements."""
        return len(self) == 0

    def full(self) -> bool:
        """Return whether the queue holds ``capacity()`` elements."""
        return len(self) == self._capacity

    def push(self, value: Any) -> None:
        """Append ``value``; raise :class:`queue.Full` if there is no room."""
        if self.full():
            raise queue.Full
        self._ring[self._push_cursor % self._capacity] = value
        self._push_cursor += 1

    def pop(self) -> Any:
        """Remove and return the oldest value; raise :class:`queue.Empty` if none."""
        if self.empty():
            raise queue.Empty
        slot = self._pop_cursor % self._capacity
        value = self._ring[slot]
        self._ring[slot] = None
        self._pop_cursor += 1
        return value


class SpscFifo(Fifo):
    """Bounded FIFO safe for one producer thread and one consumer thread.

    The producer alone advances the push cursor and the consumer alone
    advances the pop cursor; each reads the other's cursor once per call.
    """

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def __len__(self) -> int:
        push_cursor = self._push_cursor
        pop_cursor = self._pop_cursor
        return push_cursor - pop_cursor

    def push(self, value: Any) -> None:
        """Append ``value``; raise :class:`queue.Full` if there is no room."""
        push_cursor = self._push_cursor
        pop_cursor = self._pop_cursor
        if push_cursor - pop_cursor == self._capacity:
            raise queue.Full
        self._ring[push_cursor % self._capacity] = value
        self._push_cursor = push_cursor + 1

    def pop(self) -> Any:
        """Remove and return the oldest value; raise :class:`queue.Empty` if none."""
        push_cursor = self._push_cursor
        pop_cursor = self._pop_cursor
        if push_cursor == pop_cursor:
            raise queue.Empty
        slot = pop_cursor % self._capacity
        value = self._ring[slot]
        self._ring[slot] = None
        self._pop_cursor = pop_cursor + 1
        return value