"""A list with bulk transfer and a thread-safe FIFO queue with optional bound."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Deque, Generic, Iterable, List as _ListType, Optional, TypeVar

__all__ = ["List", "QueueClosed", "ThreadsafeQueue"]

T = TypeVar("T")


class List(_ListType[T]):
    """A ``list`` that can take over another list's items and visit each item."""

    def take_all(self, other: "_ListType[T]") -> None:
        """Move every item of *other* to the end of this list, leaving *other* empty."""
        if not other:
            return
        self.extend(other)
        other.clear()

    def for_each(self, func: Callable[[T], object]) -> None:
        """Call *func* on every item, in order."""
        for item in self:
            func(item)


class QueueClosed(Exception):
    """Raised when waiting on a queue that has been shut down and is empty."""


class ThreadsafeQueue(Generic[T]):
    """FIFO queue safe for use from many threads.

    With a positive *max_size*, pushing onto a full queue drops the oldest item.
    """

    def __init__(self, max_size: int = 0, items: Optional[Iterable[T]] = None) -> None:
        self._max_size = max_size
        self._items: Deque[T] = deque()
        self._condition = threading.Condition()
        self._running = True
        for item in items or ():
            self.push(item)

    def push(self, value: T) -> None:
        """Add *value* at the back, dropping the front item if the queue is full."""
        with self._condition:
            if self._max_size > 0 and len(self._items) >= self._max_size:
                self._items.popleft()
            self._items.append(value)
            self._condition.notify()

    def try_pop(self) -> Optional[T]:
        """Remove and return the front item, or return ``None`` when empty."""
        with self._condition:
            if not self._items:
                return None
            return self._items.popleft()

    def wait_and_pop(self, timeout: Optional[float] = None) -> T:
        """Remove and return the front item, blocking while the queue is empty.

        *timeout* is in milliseconds and applies to each wait; ``None`` waits
        without limit. Raises ``TimeoutError`` when a wait times out and
        ``QueueClosed`` when the queue has been shut down while empty.
        """
        with self._condition:
            if timeout is None:
                while not self._items:
                    if not self._running:
                        raise QueueClosed("queue has been shut down")
                    self._condition.wait()
            else:
                while not self._items:
                    if not self._condition.wait(timeout / 1000.0):
                        raise TimeoutError(f"no item within {timeout} ms")
                    if not self._running:
                        raise QueueClosed("queue has been shut down")
            return self._items.popleft()

    def empty(self) -> bool:
        """Tell whether the queue holds no items."""
        with self._condition:
            return not self._items

    def size(self) -> int:
        """Number of items in the queue."""
        with self._condition:
            return len(self._items)

    def __len__(self) -> int:
        return self.size()

    def remove_front(self) -> None:
        """Drop the front item; nothing happens when the queue is empty."""
        with self._condition:
            if self._items:
                self._items.popleft()

    def wait_front(self) -> T:
        """Return the front item without removing it, blocking until there is one."""
        with self._condition:
            self._condition.wait_for(lambda: bool(self._items))
            return self._items[0]

    def try_front(self) -> Optional[T]:
        """Return the front item without removing it, or ``None`` when empty."""
        with self._condition:
            if not self._items:
                return None
            return self._items[0]

    def exit(self) -> None:
        """Shut the queue down and wake every waiting thread."""
        with self._condition:
            self._running = False
            self._condition.notify_all()