import random

import pytest

from algokit.rbtree import Color, RBNode, RBTree

KEYS = [10, 85, 15, 70, 20, 60, 30, 50, 65, 80, 90, 40, 5, 55]


@pytest.fixture
def tree():
    rb = RBTree()
    for key in KEYS:
        rb.insert(key, "Value" + str(key))
    return rb


def test_sample_tree_is_valid(tree):
    assert tree.check() is True


def test_inorder_keys_and_values(tree):
    entries = tree.inorder()
    assert [key for key, _, _ in entries] == sorted(KEYS)
    assert all(value == "Value" + str(key) for key, value, _ in entries)


def test_root_is_black(tree):
    assert tree.root.color is Color.BLACK


def test_duplicate_insert_rejected(tree):
    assert tree.insert(15, "other") is False
    assert len(tree) == len(KEYS)
    assert dict((k, v) for k, v, _ in tree.inorder())[15] == "Value15"


def test_empty_tree():
    rb = RBTree()
    assert rb.check() is True
    assert rb.inorder() == []
    assert len(rb) == 0


def test_ascending_inserts_stay_valid():
    rb = RBTree()
    for key in range(1, 101):
        assert rb.insert(key, key) is True
        assert rb.check() is True
    assert [k for k, _, _ in rb.inorder()] == list(range(1, 101))


def test_descending_inserts_stay_valid():
    rb = RBTree()
    for key in range(100, 0, -1):
        rb.insert(key, key)
    assert rb.check() is True
    assert len(rb) == 100


def test_random_inserts_stay_valid():
    rng = random.Random(7)
    keys = rng.sample(range(10_000), 500)
    rb = RBTree()
    for key in keys:
        rb.insert(key)
    assert rb.check() is True
    assert [k for k, _, _ in rb.inorder()] == sorted(keys)
    assert all(key in rb for key in keys)


def test_check_detects_red_root():
    rb = RBTree()
    rb.insert(1, "a")
    rb.root.color = Color.RED
    assert rb.check() is False


def test_check_detects_red_red():
    rb = RBTree()
    for key in (1, 2, 3):
        rb.insert(key, key)
    assert rb.check() is True
    left = rb.root.left
    assert left.color is Color.RED
    left.left = RBNode(0, 0, parent=left)
    assert rb.check() is False


def test_check_detects_black_height_mismatch():
    rb = RBTree()
    for key in (1, 2, 3):
        rb.insert(key, key)
    rb.root.left.color = Color.BLACK
    assert rb.check() is False