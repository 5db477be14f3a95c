"""A thread-safe LIFO queue whose consumers block until an item arrives."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

T = TypeVar("T")


class MTQueue(Generic[T]):
    """Multi-producer, multi-consumer stack guarded by a condition variable.

    Items are taken from the end most recently pushed.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._items: list[T] = []

    def _take(self) -> T:
        self._cond.wait_for(lambda: bool(self._items))
        return self._items.pop()

    def pop(self) -> T:
        """Remove and return the newest item, waiting until one exists."""
        with self._cond:
            return self._take()

    @contextmanager
    def pop_hold(self) -> Iterator[T]:
        """Pop the newest item and keep the queue locked inside the block.

        Use as ``with queue.pop_hold() as item: ...``; other producers and
        consumers wait until the block ends.
        """
        with self._cond:
            yield self._take()

    def push(self, value: T) -> None:
        """Add one item and wake one waiting consumer."""
        with self._cond:
            self._items.append(value)
            self._cond.notify()

    def push_many(self, values: Iterable[T]) -> None:
        """Add several items at once and wake every waiting consumer."""
        with self._cond:
            self._items.extend(values)
            self._cond.notify_all()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)