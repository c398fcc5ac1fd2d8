"""A self-balancing AVL binary search tree with parent links."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

# The printer descends at most this many levels below the root.
_RENDER_LEVELS = 5


class Node:
    """A tree node holding a key, its value and links to its neighbours."""

    __slots__ = ("key", "value", "height", "left", "right", "parent")

    def __init__(self, key: Any, value: Any = None) -> None:
        self.key = key
        self.value = value
        self.height = 1
        self.left: Node | None = None
        self.right: Node | None = None
        self.parent: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.value!r})"

    def _leftmost(self) -> Node:
        node = self
        while node.left is not None:
            node = node.left
        return node

    def _rightmost(self) -> Node:
        node = self
        while node.right is not None:
            node = node.right
        return node

    def successor(self) -> Node | None:
        """Return the node with the next larger key, or None."""
        if self.right is not None:
            return self.right._leftmost()
        node = self
        while node.parent is not None and node.parent.right is node:
            node = node.parent
        return node.parent

    def predecessor(self) -> Node | None:
        """Return the node with the next smaller key, or None."""
        if self.left is not None:
            return self.left._rightmost()
        node = self
        while node.parent is not None and node.parent.left is node:
            node = node.parent
        return node.parent


def _height(node: Node | None) -> int:
    return node.height if node is not None else 0


def _fix_height(node: Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: Node) -> int:
    return _height(node.right) - _height(node.left)


def _rotate_right(node: Node) -> Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    if node.left is not None:
        node.left.parent = node
    pivot.right = node
    pivot.parent = node.parent
    node.parent = pivot
    _fix_height(node)
    _fix_height(pivot)
    return pivot


def _rotate_left(node: Node) -> Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    if node.right is not None:
        node.right.parent = node
    pivot.left = node
    pivot.parent = node.parent
    node.parent = pivot
    _fix_height(node)
    _fix_height(pivot)
    return pivot


def _balance(node: Node) -> Node:
    _fix_height(node)
    factor = _balance_factor(node)
    if factor == 2:
        assert node.right is not None
        if _balance_factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if factor == -2:
        assert node.left is not None
        if _balance_factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _clone(node: Node | None, parent: Node | None) -> Node | None:
    if node is None:
        return None
    twin = Node(node.key, node.value)
    twin.height = node.height
    twin.parent = parent
    twin.left = _clone(node.left, twin)
    twin.right = _clone(node.right, twin)
    return twin


class AVLTree:
    """Ordered key/value store kept height-balanced on every change.

    Keys are unique; inserting an existing key leaves the tree unchanged.
    Iteration yields nodes in ascending key order.
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        node = self.min_node()
        while node is not None:
            following = node.successor()
            yield node
            node = following

    def __reversed__(self) -> Iterator[Node]:
        node = self.max_node()
        while node is not None:
            preceding = node.predecessor()
            yield node
            node = preceding

    def __repr__(self) -> str:
        pairs = ", ".join(f"{n.key!r}: {n.value!r}" for n in self)
        return f"{type(self).__name__}({{{pairs}}})"

    def _set_root(self, node: Node | None) -> None:
        self._root = node
        if node is not None:
            node.parent = None

    def insert(self, key: Any, value: Any = None) -> bool:
        """Add ``key`` with ``value``; return False if the key was present."""
        before = self._size
        self._set_root(self._insert(self._root, key, value))
        return self._size != before

    def _insert(self, node: Node | None, key: Any, value: Any) -> Node:
        if node is None:
            self._size += 1
            return Node(key, value)
        if key < node.key:
            child = self._insert(node.left, key, value)
            node.left = child
            child.parent = node
        elif key > node.key:
            child = self._insert(node.right, key, value)
            node.right = child
            child.parent = node
        else:
            return node
        return _balance(node)

    def remove(self, key: Any) -> bool:
        """Delete ``key``; return False if it was not present."""
        before = self._size
        self._set_root(self._remove(self._root, key))
        return self._size != before

    def _remove(self, node: Node | None, key: Any) -> Node | None:
        if node is None:
            return None
        if key < node.key:
            node.left = self._remove(node.left, key)
            if node.left is not None:
                node.left.parent = node
        elif key > node.key:
            node.right = self._remove(node.right, key)
            if node.right is not None:
                node.right.parent = node
        else:
            self._size -= 1
            left, right = node.left, node.right
            node.left = node.right = node.parent = None
            if right is None:
                return _balance(left) if left is not None else None
            replacement = right._leftmost()
            replacement.right = self._remove_min(right)
            replacement.left = left
            if replacement.left is not None:
                replacement.left.parent = replacement
            if replacement.right is not None:
                replacement.right.parent = replacement
            return _balance(replacement)
        return _balance(node)

    def _remove_min(self, node: Node) -> Node | None:
        if node.left is None:
            return node.right
        node.left = self._remove_min(node.left)
        if node.left is not None:
            node.left.parent = node
        return _balance(node)

    def find(self, key: Any) -> Node | None:
        """Return the node holding ``key``, or None."""
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def min_node(self) -> Node | None:
        """Return the node with the smallest key, or None when empty."""
        return self._root._leftmost() if self._root is not None else None

    def max_node(self) -> Node | None:
        """Return the node with the largest key, or None when empty."""
        return self._root._rightmost() if self._root is not None else None

    def height(self) -> int:
        """Return the number of levels in the tree."""
        return _height(self._root)

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def copy(self) -> AVLTree:
        """Return an independent tree with the same shape and contents."""
        twin = type(self)()
        twin._root = _clone(self._root, None)
        twin._size = self._size
        return twin

    def render(self) -> str:
        """Draw the upper levels of the tree, one node per line."""
        lines: list[str] = []

        def walk(node: Node, indent: str, last: bool, level: int) -> None:
            if level >= _RENDER_LEVELS:
                return
            lines.append(f"{indent}{'R----' if last else 'L----'}({node.key})")
            indent += "     " if last else "|    "
            if node.left is not None:
                walk(node.left, indent, False, level + 1)
            if node.right is not None:
                walk(node.right, indent, True, level + 1)

        if self._root is not None:
            walk(self._root, "", True, 0)
        return "\n".join(lines)