import threading

import pytest

from algokit.mtvector import MTVector


def test_default_size():
    assert len(MTVector()) == 1_000_000


def test_set_value_stores_at_index():
    vec = MTVector(size=10)
    vec.set_value(3, 2.5)
    assert vec[3] == 2.5
    assert vec[2] == 0.0
    assert len(vec) == 10


def test_set_value_out_of_range():
    vec = MTVector(size=4)
    with pytest.raises(IndexError):
        vec.set_value(4, 1.0)
    with pytest.raises(IndexError):
        vec.set_value(-1, 1.0)


def test_modifier_appends_values():
    vec = MTVector(size=2)
    with vec.modifier() as modifier:
        for i in range(3):
            modifier.set_value(i, float(i))
    assert len(vec) == 5
    assert [vec[i] for i in range(2, 5)] == [0.0, 1.0, 2.0]


def test_modifier_outside_block_raises():
    vec = MTVector(size=1)
    modifier = vec.modifier()
    with pytest.raises(RuntimeError):
        modifier.set_value(0, 1.0)


def test_modifier_blocks_other_writers():
    vec = MTVector(size=3)
    written = threading.Event()

    def writer():
        vec.set_value(1, 9.0)
        written.set()

    with vec.modifier():
        thread = threading.Thread(target=writer)
        thread.start()
        assert not written.wait(0.2)
    assert written.wait(5)
    thread.join(timeout=5)
    assert vec[1] == 9.0