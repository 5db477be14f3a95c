"""An unbalanced binary search tree mapping keys to values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    key: Any
    value: Any = 1
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


class BSTree:
    """Binary search tree with iterative insert, lookup and removal."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def insert(self, key: Any, value: Any = 1) -> bool:
        """Insert ``key`` with ``value``.

        Returns False when the key already exists; its value is then
        replaced by ``value``.
        """
        if self.root is None:
            self.root = BSTNode(key, value)
            return True
        cur: Optional[BSTNode] = self.root
        parent = self.root
        while cur is not None:
            parent = cur
            if cur.key < key:
                cur = cur.right
            elif cur.key > key:
                cur = cur.left
            else:
                cur.value = value
                return False
        if key > parent.key:
            parent.right = BSTNode(key, value)
        else:
            parent.left = BSTNode(key, value)
        return True

    def find(self, key: Any) -> Optional[BSTNode]:
        """Return the node holding ``key``, or None."""
        cur = self.root
        while cur is not None:
            if cur.key == key:
                return cur
            cur = cur.left if cur.key > key else cur.right
        return None

    def remove(self, key: Any) -> bool:
        """Remove ``key``; return False if it was not in the tree."""
        parent: Optional[BSTNode] = None
        cur = self.root
        while cur is not None:
            if cur.key < key:
                parent, cur = cur, cur.right
            elif cur.key > key:
                parent, cur = cur, cur.left
            else:
                break
        if cur is None:
            return False

        if cur.left is None or cur.right is None:
            child = cur.left if cur.left is not None else cur.right
            if parent is None:
                self.root = child
            elif parent.left is cur:
                parent.left = child
            else:
                parent.right = child
            return True

        successor_parent = cur
        successor = cur.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        cur.key = successor.key
        cur.value = successor.value
        if successor_parent.left is successor:
            successor_parent.left = successor.right
        else:
            successor_parent.right = successor.right
        return True

    def min(self) -> Optional[BSTNode]:
        """Return the node with the smallest key, or None if empty."""
        cur = self.root
        if cur is None:
            return None
        while cur.left is not None:
            cur = cur.left
        return cur

    def max(self) -> Optional[BSTNode]:
        """Return the node with the largest key, or None if empty."""
        cur = self.root
        if cur is None:
            return None
        while cur.right is not None:
            cur = cur.right
        return cur

    def _inorder_nodes(self) -> Iterator[BSTNode]:
        stack: list[BSTNode] = []
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

        def measure(node: Optional[BSTNode]) -> int:
            if node is None:
                return -1
            return 1 + max(measure(node.left), measure(node.right))

        return measure(self.root)

    def is_balanced(self) -> bool:
        """True when no node's subtree heights differ by more than one."""

        def check(node: Optional[BSTNode]) -> tuple[bool, int]:
            if node is None:
                return True, -1
            left_ok, left_height = check(node.left)
            right_ok, right_height = check(node.right)
            balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
            return balanced, 1 + max(left_height, right_height)

        return check(self.root)[0]

    def __len__(self) -> int:
        return sum(1 for _ in self._inorder_nodes())

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._inorder_nodes())