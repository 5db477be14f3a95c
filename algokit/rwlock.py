"""Reader-writer locking and two small classes built on it."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class RWLock:
    """Shared/exclusive lock: many readers or one writer at a time.

    Waiting writers are preferred over newly arriving readers.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        with self._cond:
            self._cond.wait_for(
                lambda: not self._writer and self._waiting_writers == 0
            )
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        with self._cond:
            self._waiting_writers += 1
            try:
                self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ThreadSafeCounter:
    """Counter readable by many threads at once, written by one at a time."""

    def __init__(self) -> None:
        self._lock = RWLock()
        self._value = 0

    def get(self) -> int:
        with self._lock.read_locked():
            return self._value

    def increment(self) -> None:
        with self._lock.write_locked():
            self._value += 1

    def reset(self) -> None:
        with self._lock.write_locked():
            self._value = 0


class WRData:
    """A single integer guarded by a reader-writer lock."""

    def __init__(self) -> None:
        self._lock = RWLock()
        self._data = 0

    def read(self) -> int:
        """Return the current value."""
        with self._lock.read_locked():
            logger.info("Reading data: %d", self._data)
            return self._data

    def write(self, new_data: int) -> None:
        """Replace the value with ``new_data``."""
        with self._lock.write_locked():
            logger.info("Writing data: %d", new_data)
            self._data = new_data