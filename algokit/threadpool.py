"""A fixed-size pool of worker threads consuming a FIFO task queue."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections import deque

logger = logging.getLogger(__name__)


class Task(ABC):
    """A unit of work run by a pool worker."""

    @abstractmethod
    def execute(self) -> object:
        """Do the work."""


class ShowValueTask(Task):
    """Print the running thread's id together with a value."""

    def __init__(self, value: int) -> None:
        self.value = value

    def execute(self) -> str:
        line = f"ThreadID {threading.get_ident()}: {self.value}"
        print(line)
        return line


class ThreadPool:
    """Runs queued tasks on a fixed number of worker threads."""

    def __init__(self, num_threads: int = 4) -> None:
        if num_threads < 1:
            raise ValueError("a pool needs at least one thread")
        self.num_threads = num_threads
        self._cond = threading.Condition(threading.Lock())
        self._tasks: deque[Task] = deque()
        self._threads: list[threading.Thread] = []
        self._closed = False

    def start_threads(self) -> None:
        """Start the worker threads."""
        with self._cond:
            if self._threads:
                raise RuntimeError("threads already started")
            if self._closed:
                raise RuntimeError("pool has been shut down")
            for _ in range(self.num_threads):
                thread = threading.Thread(target=self._run, daemon=True)
                thread.start()
                self._threads.append(thread)

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._tasks or self._closed)
                if not self._tasks:
                    return
                task = self._tasks.popleft()
            try:
                task.execute()
            except Exception:
                logger.exception("task %r failed", task)

    def add_task(self, task: Task) -> None:
        """Queue ``task`` and wake one worker."""
        with self._cond:
            if self._closed:
                raise RuntimeError("pool has been shut down")
            self._tasks.append(task)
            self._cond.notify()

    def shutdown(self) -> None:
        """Let workers finish every queued task, then join them."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()
            threads = list(self._threads)
        for thread in threads:
            thread.join()

    def __enter__(self) -> ThreadPool:
        self.start_threads()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()