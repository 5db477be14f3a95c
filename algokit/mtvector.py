"""A lock-guarded vector of floats with a batch modifier that holds the lock."""

from __future__ import annotations

import threading
from typing import Optional

DEFAULT_SIZE = 1_000_000


class MTVector:
    """Fixed-length list of floats whose writes are serialised by a lock."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        self._lock = threading.Lock()
        self._values: list[float] = [0.0] * size

    def set_value(self, index: int, value: float) -> None:
        """Store ``value`` at ``index``; raise IndexError when out of range."""
        with self._lock:
            if not 0 <= index < len(self._values):
                raise IndexError(f"index {index} out of range")
            self._values[index] = value

    def modifier(self) -> MTVectorModifier:
        """Return a modifier that locks the vector once for many writes."""
        return MTVectorModifier(self)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]


class MTVectorModifier:
    """Holds an MTVector's lock for the whole ``with`` block."""

    def __init__(self, vector: MTVector) -> None:
        self._vector = vector
        self._owner: Optional[int] = None

    def __enter__(self) -> MTVectorModifier:
        self._vector._lock.acquire()
        self._owner = threading.get_ident()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._owner = None
        self._vector._lock.release()

    def set_value(self, index: int, value: float) -> None:
        """Append ``value`` to the vector; ``index`` is not used.

        Must be called inside the modifier's ``with`` block.
        """
        if self._owner != threading.get_ident():
            raise RuntimeError("modifier is not holding the lock")
        self._vector._values.append(value)