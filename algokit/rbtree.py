"""A red-black tree supporting insertion and invariant checking."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)


class Color(enum.Enum):
    RED = "RED"
    BLACK = "BLACK"


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree; new nodes start red."""

    key: Any = None
    value: Any = None
    color: Color = Color.RED
    left: Optional[RBNode] = field(default=None, repr=False)
    right: Optional[RBNode] = field(default=None, repr=False)
    parent: Optional[RBNode] = field(default=None, repr=False)


class RBTree:
    """Self-balancing binary search tree using red-black colouring."""

    def __init__(self) -> None:
        self.root: Optional[RBNode] = None

    def insert(self, key: Any, value: Any = None) -> bool:
        """Insert ``key``; return False if it already exists."""
        if self.root is None:
            self.root = RBNode(key, value, Color.BLACK)
            return True

        parent: Optional[RBNode] = None
        cur: Optional[RBNode] = self.root
        while cur is not None:
            parent = cur
            if key < cur.key:
                cur = cur.left
            elif key > cur.key:
                cur = cur.right
            else:
                return False

        cur = RBNode(key, value, parent=parent)
        if key < parent.key:
            parent.left = cur
        else:
            parent.right = cur

        while cur is not self.root and parent.color is Color.RED:
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    cur = grandparent
                    parent = cur.parent
                    continue
                if cur is parent.right:
                    cur = parent
                    self._rotate_left(cur)
                    parent = cur.parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
                break
            uncle = grandparent.left
            if uncle is not None and uncle.color is Color.RED:
                parent.color = uncle.color = Color.BLACK
                grandparent.color = Color.RED
                cur = grandparent
                parent = cur.parent
                continue
            if cur is parent.left:
                cur = parent
                self._rotate_right(cur)
                parent = cur.parent
            parent.color = Color.BLACK
            grandparent.color = Color.RED
            self._rotate_left(grandparent)
            break

        self.root.color = Color.BLACK
        return True

    def _replace_child(self, parent: Optional[RBNode], old: RBNode, new: RBNode) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, p: RBNode) -> RBNode:
        sub = p.right
        p.right = sub.left
        if sub.left is not None:
            sub.left.parent = p
        sub.parent = p.parent
        self._replace_child(p.parent, p, sub)
        sub.left = p
        p.parent = sub
        return sub

    def _rotate_right(self, p: RBNode) -> RBNode:
        sub = p.left
        p.left = sub.right
        if sub.right is not None:
            sub.right.parent = p
        sub.parent = p.parent
        self._replace_child(p.parent, p, sub)
        sub.right = p
        p.parent = sub
        return sub

    def _nodes(self, node: Optional[RBNode]) -> Iterator[RBNode]:
        if node is None:
            return
        yield from self._nodes(node.left)
        yield node
        yield from self._nodes(node.right)

    def inorder(self) -> list[tuple[Any, Any, Color]]:
        """(key, value, colour) triples in ascending key order."""
        return [(node.key, node.value, node.color) for node in self._nodes(self.root)]

    def check(self) -> bool:
        """Return True when every red-black property holds.

        Each violation found is logged as a warning.
        """
        if self.root is None:
            return True
        if self.root.color is not Color.BLACK:
            logger.warning("Violation: Root is not BLACK.")
            return False

        expected = 0
        cur: Optional[RBNode] = self.root
        while cur is not None:
            if cur.color is Color.BLACK:
                expected += 1
            cur = cur.left

        return self._check(self.root, expected, 0)

    def _check(self, node: Optional[RBNode], expected: int, seen: int) -> bool:
        if node is None:
            if seen != expected:
                logger.warning(
                    "Violation: Black height mismatch. Expected %d, but got %d on one path.",
                    expected,
                    seen,
                )
                return False
            return True
        if node.color is Color.RED and any(
            child is not None and child.color is Color.RED
            for child in (node.left, node.right)
        ):
            logger.warning("Violation: Red node %s has a red child.", node.key)
            return False
        if node.color is Color.BLACK:
            seen += 1
        return self._check(node.left, expected, seen) and self._check(
            node.right, expected, seen
        )

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes(self.root))

    def __contains__(self, key: Any) -> bool:
        cur = self.root
        while cur is not None:
            if key < cur.key:
                cur = cur.left
            elif key > cur.key:
                cur = cur.right
            else:
                return True
        return False