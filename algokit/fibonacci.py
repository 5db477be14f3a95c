"""Fibonacci numbers in signed 64-bit arithmetic, computed directly or in the background."""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor

_MODULUS = 1 << 64
_SIGN = 1 << 63


def fibonacci(n: int) -> int:
    """Return F(n) wrapped to a signed 64-bit integer; n <= 1 gives n."""
    if n <= 1:
        return n
    a, b = 0, 1  # F(k), F(k + 1)
    for bit in bin(n)[2:]:
        doubled = a * ((2 * b - a) % _MODULUS) % _MODULUS
        squares = (a * a + b * b) % _MODULUS
        if bit == "1":
            a, b = squares, (doubled + squares) % _MODULUS
        else:
            a, b = doubled, squares
    return a - _MODULUS if a >= _SIGN else a


def fibonacci_in_thread(n: int) -> Future[int]:
    """Compute F(n) on a dedicated thread that fulfils the returned future."""
    future: Future[int] = Future()
    future.set_running_or_notify_cancel()

    def work() -> None:
        try:
            future.set_result(fibonacci(n))
        except BaseException as error:
            future.set_exception(error)

    threading.Thread(target=work, daemon=True).start()
    return future


def fibonacci_async(n: int) -> Future[int]:
    """Schedule F(n) on an executor and return its future."""
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        return executor.submit(fibonacci, n)
    finally:
        executor.shutdown(wait=False)