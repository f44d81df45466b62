"""A blocking FIFO queue shared between producer and consumer threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class WorkQueue(Generic[T]):
    """Thread-safe FIFO queue with a nominal capacity.

    The capacity is advisory: ``full()`` reports when it has been reached,
    but ``put()`` never refuses an item.
    """

    def __init__(self, max_items: int = 0) -> None:
        self._max_items = max_items
        self._items: Deque[T] = deque()
        self._cond = threading.Condition()

    @property
    def max_items(self) -> int:
        return self._max_items

    def put(self, item: T) -> None:
        """Append an item and wake one waiting consumer."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def get(self) -> T:
        """Remove and return the oldest item, blocking until one is available."""
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def peek(self) -> T:
        """Return the oldest item without removing it."""
        with self._cond:
            if not self._items:
                raise IndexError("peek from an empty queue")
            return self._items[0]

    def empty(self) -> bool:
        with self._cond:
            return not self._items

    def full(self) -> bool:
        """True once the number of queued items reaches the capacity."""
        with self._cond:
            return len(self._items) >= self._max_items

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)