"""A singly linked list whose head insertions are safe across threads."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import Iterator, Sequence

__all__ = ["ConcurrentList", "main"]


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class ConcurrentList:
    """Linked list where any number of threads may prepend values at once.

    Each insertion retries a compare-and-swap on the head until it wins,
    so no insertion is ever lost.
    """

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._cas_lock = threading.Lock()

    def _compare_and_swap(self, expected: _Node | None, new: _Node) -> bool:
        with self._cas_lock:
            if self._head is expected:
                self._head = new
                return True
            return False

    def insert(self, value: int) -> None:
        """Prepend ``value`` to the list."""
        node = _Node(value)
        while True:
            old_head = self._head
            node.next = old_head
            if self._compare_and_swap(old_head, node):
                return

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def render(self) -> str:
        """Return the values from head to tail, each followed by a space."""
        return "".join(f"{value} " for value in self)


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a list from two threads at once and print it."""
    shared = ConcurrentList()

    def fill(step: int) -> None:
        for i in range(1, 6):
            shared.insert(i * step)

    workers = [threading.Thread(target=fill, args=(step,)) for step in (10, 100)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    sys.stdout.write(shared.render() + "\n")
    return 0