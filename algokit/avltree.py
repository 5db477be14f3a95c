"""A self-balancing AVL tree mapping keys to values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree.

    ``balance`` is the height of the right subtree minus the height of
    the left subtree.
    """

    key: Any
    value: Any = 1
    balance: int = 0
    parent: Optional[AVLNode] = field(default=None, repr=False)
    left: Optional[AVLNode] = field(default=None, repr=False)
    right: Optional[AVLNode] = field(default=None, repr=False)


class AVLTree:
    """Height-balanced binary search tree with iterative insert and removal."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def insert(self, key: Any, value: Any) -> bool:
        """Insert ``key`` with ``value``; return False if the key exists."""
        if self.root is None:
            self.root = AVLNode(key, value)
            return True

        parent = self.root
        cur: Optional[AVLNode] = self.root
        while cur is not None:
            parent = cur
            if key < cur.key:
                cur = cur.left
            elif key > cur.key:
                cur = cur.right
            else:
                return False

        node = AVLNode(key, value, parent=parent)
        if key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._rebalance_after_insert(parent, node)
        return True

    def find(self, key: Any) -> Optional[AVLNode]:
        """Return the node holding ``key``, or None."""
        cur = self.root
        while cur is not None:
            if key < cur.key:
                cur = cur.left
            elif key > cur.key:
                cur = cur.right
            else:
                return cur
        return None

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return False if it was not in the tree."""
        target = self.find(key)
        if target is None:
            return False
        start = self._remove_node(target)
        if start is not None:
            self._rebalance_after_remove(start)
        return True

    def min(self) -> Optional[AVLNode]:
        """Return the node with the smallest key, or None if empty."""
        cur = self.root
        if cur is None:
            return None
        while cur.left is not None:
            cur = cur.left
        return cur

    def max(self) -> Optional[AVLNode]:
        """Return the node with the largest key, or None if empty."""
        cur = self.root
        if cur is None:
            return None
        while cur.right is not None:
            cur = cur.right
        return cur

    def _inorder_nodes(self) -> Iterator[AVLNode]:
        stack: list[AVLNode] = []
        cur = self.root
        while cur is not None or stack:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur
            cur = cur.right

    def inorder(self) -> list[Any]:
        """Keys in in-order (ascending) sequence."""
        return [node.key for node in self._inorder_nodes()]

    def preorder(self) -> list[Any]:
        """Keys in pre-order sequence."""
        if self.root is None:
            return []
        keys = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            keys.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return keys

    def postorder(self) -> list[Any]:
        """Keys in post-order sequence."""
        if self.root is None:
            return []
        stack = [self.root]
        output: list[Any] = []
        while stack:
            node = stack.pop()
            output.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        output.reverse()
        return output

    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single node."""
        return self._height(self.root)

    def is_balanced(self) -> bool:
        """True when the tree is a valid AVL tree with correct balance factors."""

        def check(node: Optional[AVLNode]) -> tuple[bool, int]:
            if node is None:
                return True, -1
            left_ok, left_height = check(node.left)
            right_ok, right_height = check(node.right)
            diff = right_height - left_height
            ok = left_ok and right_ok and abs(diff) <= 1 and node.balance == diff
            return ok, 1 + max(left_height, right_height)

        return check(self.root)[0]

    def __len__(self) -> int:
        return sum(1 for _ in self._inorder_nodes())

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._inorder_nodes())

    @classmethod
    def _height(cls, node: Optional[AVLNode]) -> int:
        if node is None:
            return -1
        return 1 + max(cls._height(node.left), cls._height(node.right))

    def _replace_child(
        self, parent: Optional[AVLNode], old: AVLNode, new: Optional[AVLNode]
    ) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, p: AVLNode) -> AVLNode:
        c = p.right
        parent = p.parent
        p.right = c.left
        if c.left is not None:
            c.left.parent = p
        c.left = p
        p.parent = c
        c.parent = parent
        self._replace_child(parent, p, c)
        p.balance = p.balance - 1 - max(0, c.balance)
        c.balance = c.balance - 1 + min(0, p.balance)
        return c

    def _rotate_right(self, p: AVLNode) -> AVLNode:
        c = p.left
        parent = p.parent
        p.left = c.right
        if c.right is not None:
            c.right.parent = p
        c.right = p
        p.parent = c
        c.parent = parent
        self._replace_child(parent, p, c)
        p.balance = p.balance + 1 - min(0, c.balance)
        c.balance = c.balance + 1 + max(0, p.balance)
        return c

    def _rebalance(self, p: AVLNode) -> AVLNode:
        if p.balance == 2:
            if p.right.balance < 0:
                self._rotate_right(p.right)
            return self._rotate_left(p)
        if p.balance == -2:
            if p.left.balance > 0:
                self._rotate_left(p.left)
            return self._rotate_right(p)
        return p

    def _rebalance_after_insert(self, parent: AVLNode, inserted: AVLNode) -> None:
        cur: Optional[AVLNode] = parent
        child = inserted
        while cur is not None:
            cur.balance += -1 if child is cur.left else 1
            if cur.balance == 0:
                return
            if abs(cur.balance) == 2:
                self._rebalance(cur)
                return
            child = cur
            cur = cur.parent

    def _rebalance_after_remove(self, cur: Optional[AVLNode]) -> None:
        while cur is not None:
            if abs(cur.balance) == 2:
                cur = self._rebalance(cur)
                if cur.balance != 0:
                    return
            elif cur.balance != 0:
                return
            # The subtree rooted at cur lost one level of height.
            parent = cur.parent
            if parent is not None:
                parent.balance += 1 if cur is parent.left else -1
            cur = parent

    def _remove_node(self, target: AVLNode) -> Optional[AVLNode]:
        """Unlink ``target`` (or its successor) and return where rebalancing starts."""
        if target.left is None or target.right is None:
            child = target.left if target.left is not None else target.right
            parent = target.parent
            change = 0
            if parent is not None:
                change = 1 if target is parent.left else -1
            self._replace_child(parent, target, child)
            if child is not None:
                child.parent = parent
        else:
            successor = target.right
            while successor.left is not None:
                successor = successor.left
            target.key = successor.key
            target.value = successor.value
            parent = successor.parent
            change = 1 if successor is parent.left else -1
            self._replace_child(parent, successor, successor.right)
            if successor.right is not None:
                successor.right.parent = parent

        if parent is not None:
            parent.balance += change
        return parent