import pytest

from algokit.bstree import BSTree

KEYS = [5, 3, 4, 1, 7, 8, 2, 6, 0, 9]
REMOVAL_ORDER = [7, 0, 9, 1, 5, 4, 2, 3, 8, 6]


@pytest.fixture
def tree():
    bst = BSTree()
    for key in KEYS:
        bst.insert(key, 1)
    return bst


def test_inorder_is_sorted(tree):
    assert tree.inorder() == sorted(KEYS)


def test_height_of_sample_tree(tree):
    assert tree.height() == 3


def test_empty_tree_height():
    assert BSTree().height() == -1


def test_single_node_height():
    bst = BSTree()
    bst.insert(42, "x")
    assert bst.height() == 0


def test_removals_keep_order(tree):
    remaining = sorted(KEYS)
    for key in REMOVAL_ORDER:
        assert tree.remove(key) is True
        remaining.remove(key)
        assert tree.inorder() == remaining
    assert tree.root is None
    assert tree.height() == -1


def test_remove_missing_returns_false(tree):
    assert tree.remove(100) is False
    assert tree.inorder() == sorted(KEYS)


def test_duplicate_insert_updates_value(tree):
    assert tree.insert(4, 99) is False
    assert tree.find(4).value == 99
    assert tree.inorder() == sorted(KEYS)


def test_find(tree):
    assert tree.find(6).key == 6
    assert tree.find(11) is None


def test_min_max(tree):
    assert tree.min().key == min(KEYS)
    assert tree.max().key == max(KEYS)
    empty = BSTree()
    assert empty.min() is None
    assert empty.max() is None


def test_preorder(tree):
    assert tree.preorder() == [5, 3, 1, 0, 2, 4, 7, 6, 8, 9]


def test_postorder_invariants(tree):
    post = tree.postorder()
    assert post[-1] == tree.root.key
    assert sorted(post) == sorted(KEYS)
    assert tree.preorder()[0] == post[-1]


def test_traversals_of_empty_tree():
    bst = BSTree()
    assert bst.inorder() == []
    assert bst.preorder() == []
    assert bst.postorder() == []


def test_is_balanced(tree):
    assert tree.is_balanced() is True


def test_degenerate_tree_not_balanced():
    bst = BSTree()
    for key in range(1, 6):
        bst.insert(key)
    assert bst.is_balanced() is False
    assert bst.height() == 4


def test_remove_root_with_two_children(tree):
    assert tree.remove(5) is True
    assert tree.root.key == 6
    assert 5 not in tree
    assert len(tree) == len(KEYS) - 1