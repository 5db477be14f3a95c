"""Cooperative cancellation: stop tokens and threads that poll them."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional


class StopToken:
    """A one-way flag that a thread checks to know it should finish."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._stopped = False
        self._callbacks: list[Callable[[], object]] = []

    def request_stop(self) -> bool:
        """Request a stop; return True only for the first request.

        Registered callbacks run in the requesting thread.
        """
        with self._lock:
            if self._stopped:
                return False
            self._stopped = True
            callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()
        return True

    def stop_requested(self) -> bool:
        return self._stopped

    def add_callback(self, callback: Callable[[], object]) -> None:
        """Run ``callback`` on stop, or at once if a stop was already requested."""
        with self._lock:
            if not self._stopped:
                self._callbacks.append(callback)
                return
        callback()


class StoppableThread(ABC):
    """A thread whose body polls ``is_exit`` and returns once asked to stop."""

    def __init__(self) -> None:
        self.token = StopToken()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Run ``do_execute`` in a new thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("thread is already running")
        self._thread = threading.Thread(target=self.do_execute, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Request the thread to exit and wait for it."""
        self.token.request_stop()
        self.wait()

    def wait(self) -> None:
        """Wait for the thread to finish, if it was started."""
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    def is_exit(self) -> bool:
        return self.token.stop_requested()

    @abstractmethod
    def do_execute(self) -> None:
        """The thread body."""