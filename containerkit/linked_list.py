"""A doubly linked list with a sentinel node."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Any

# Two links plus an eight-byte payload slot per node.
_NODE_BYTES = 24
_MAX_SIZE = sys.maxsize // _NODE_BYTES


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self

    def attach_before(self, node: _Node) -> None:
        """Link ``node`` in directly before this node."""
        node.next = self
        node.prev = self.prev
        self.prev.next = node
        self.prev = node

    def detach(self) -> None:
        """Unlink this node from its neighbours."""
        self.prev.next = self.next
        self.next.prev = self.prev
        self.next = self
        self.prev = self


class LinkedList:
    """Doubly linked list supporting splicing, merging and in-place reordering."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._size = 0
        for item in items:
            self.push_back(item)

    @classmethod
    def with_size(cls, n: int, fill: Any = None) -> LinkedList:
        """Create a list holding ``n`` copies of ``fill``."""
        if n < 0:
            raise ValueError("size must not be negative")
        return cls(fill for _ in range(n))

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def _walk(self, forward: bool) -> Iterator[_Node]:
        step = "next" if forward else "prev"
        node = getattr(self._head, step)
        while node is not self._head:
            yield node
            node = getattr(node, step)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._walk(True))

    def __reversed__(self) -> Iterator[Any]:
        return (node.value for node in self._walk(False))

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int, allow_end: bool = False) -> _Node:
        size = self._size
        if index < 0:
            index += size
        limit = size if allow_end else size - 1
        if not 0 <= index <= limit:
            raise IndexError("list index out of range")
        if index == size:
            return self._head
        if index <= size // 2:
            walk, steps = self._walk(True), index
        else:
            walk, steps = self._walk(False), size - 1 - index
        for _ in range(steps):
            next(walk)
        return next(walk)

    def _edge(self, last: bool, action: str) -> _Node:
        if not self._size:
            raise IndexError(f"{action} an empty list")
        return self._head.prev if last else self._head.next

    def _link_before(self, target: _Node, value: Any) -> None:
        target.attach_before(_Node(value))
        self._size += 1

    def _remove(self, node: _Node) -> Any:
        node.detach()
        self._size -= 1
        return node.value

    def front(self) -> Any:
        """Return the first element."""
        return self._edge(False, "front of").value

    def back(self) -> Any:
        """Return the last element."""
        return self._edge(True, "back of").value

    def max_size(self) -> int:
        """Return the largest number of elements the list could hold."""
        return _MAX_SIZE

    def clear(self) -> None:
        while self._size:
            self._remove(self._head.next)

    def insert(self, index: int, value: Any) -> int:
        """Insert ``value`` before position ``index``; return its position."""
        target = self._node_at(index, allow_end=True)
        position = index + self._size if index < 0 else index
        self._link_before(target, value)
        return position

    def erase(self, index: int) -> Any:
        """Remove the element at ``index`` and return it."""
        return self._remove(self._node_at(index))

    def push_back(self, value: Any) -> None:
        self._link_before(self._head, value)

    def pop_back(self) -> Any:
        return self._remove(self._edge(True, "pop from"))

    def push_front(self, value: Any) -> None:
        self._link_before(self._head.next, value)

    def pop_front(self) -> Any:
        return self._remove(self._edge(False, "pop from"))

    def swap(self, other: LinkedList) -> None:
        """Exchange contents with ``other``."""
        if other is not self:
            self._head, other._head = other._head, self._head
            self._size, other._size = other._size, self._size

    def merge(self, other: LinkedList) -> None:
        """Merge sorted ``other`` into this sorted list, leaving ``other`` empty."""
        if other is self:
            return
        current = self._head.next
        incoming = other._head.next
        while current is not self._head and incoming is not other._head:
            if incoming.value < current.value:
                following = incoming.next
                other._remove(incoming)
                current.attach_before(incoming)
                self._size += 1
                incoming = following
            else:
                current = current.next
        self.splice(self._size, other)

    def splice(self, index: int, other: LinkedList) -> None:
        """Move every element of ``other`` in before position ``index``."""
        if other is self:
            raise ValueError("cannot splice a list into itself")
        target = self._node_at(index, allow_end=True)
        if not other._size:
            return
        first, last = other._head.next, other._head.prev
        first.prev = target.prev
        target.prev.next = first
        last.next = target
        target.prev = last
        self._size += other._size
        other._size = 0
        other._head.next = other._head
        other._head.prev = other._head

    def reverse(self) -> None:
        node = self._head
        while True:
            node.next, node.prev = node.prev, node.next
            node = node.prev
            if node is self._head:
                break

    def unique(self) -> None:
        """Remove consecutive duplicate elements."""
        kept = None
        for node in list(self._walk(True)):
            if kept is not None and node.value == kept.value:
                self._remove(node)
            else:
                kept = node

    def sort(self) -> None:
        """Sort the elements in ascending order."""
        for node, value in zip(list(self._walk(True)), sorted(self)):
            node.value = value

    def copy(self) -> LinkedList:
        return type(self)(self)

    def take(self) -> LinkedList:
        """Return a new list holding this list's contents, leaving this one empty."""
        taken = type(self)()
        taken.swap(self)
        return taken


class _ListAdapter:
    """Base for containers that keep their elements in a LinkedList."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = LinkedList(items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def swap(self, other: _ListAdapter) -> None:
        self._items, other._items = other._items, self._items

    def copy(self) -> Any:
        return type(self)(self._items)

    def take(self) -> Any:
        """Return a new container with these contents, leaving this one empty."""
        taken = type(self)()
        self.swap(taken)
        return taken