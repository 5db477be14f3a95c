import pytest

from algokit.fibonacci import fibonacci, fibonacci_async, fibonacci_in_thread

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def _wrap(value):
    return (value + (1 << 63)) % (1 << 64) - (1 << 63)


@pytest.mark.parametrize("n", [0, 1, -3])
def test_small_n_returns_n(n):
    assert fibonacci(n) == n


def test_known_value():
    assert fibonacci(10) == 55


def test_recurrence_holds_with_wrapping():
    for n in range(2, 300):
        assert fibonacci(n) == _wrap(fibonacci(n - 1) + fibonacci(n - 2))


def test_results_stay_in_int64_range():
    for n in (92, 93, 1000, 50_000_000):
        assert INT64_MIN <= fibonacci(n) <= INT64_MAX


def test_overflow_wraps_negative():
    assert fibonacci(92) > 0
    assert fibonacci(93) < 0


def test_in_thread_matches_direct():
    future = fibonacci_in_thread(50_000_000)
    assert future.result(timeout=10) == fibonacci(50_000_000)


def test_async_matches_direct():
    future = fibonacci_async(1234)
    assert future.result(timeout=10) == fibonacci(1234)