"""An ordered key/value map backed by an AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from containerkit.avl_tree import AVLTree


class SortedMap:
    """Map with unique keys kept in ascending order.

    When a key is given more than once on construction or insertion,
    the first value stays.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Mapping[Any, Any] | Iterable[tuple[Any, Any]] = ()) -> None:
        self._tree = AVLTree()
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self._tree.insert(key, value)

    def __len__(self) -> int:
        return len(self._tree)

    def __bool__(self) -> bool:
        return len(self._tree) > 0

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._tree)

    def __contains__(self, key: object) -> bool:
        return self._tree.find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        return self.at(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert_or_assign(key, value)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{pairs}}})"

    def at(self, key: Any) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        node = self._tree.find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def get_or_insert(self, key: Any, default: Any = None) -> Any:
        """Return the value under ``key``, first storing ``default`` if absent."""
        node = self._tree.find(key)
        if node is None:
            self._tree.insert(key, default)
            return default
        return node.value

    def items(self) -> Iterator[tuple[Any, Any]]:
        return ((node.key, node.value) for node in self._tree)

    def values(self) -> Iterator[Any]:
        return (node.value for node in self._tree)

    def first(self) -> tuple[Any, Any]:
        """Return the pair with the smallest key."""
        node = self._tree.min_node()
        if node is None:
            raise KeyError("first of an empty map")
        return node.key, node.value

    def last(self) -> tuple[Any, Any]:
        """Return the pair with the largest key."""
        node = self._tree.max_node()
        if node is None:
            raise KeyError("last of an empty map")
        return node.key, node.value

    def insert(self, key: Any, value: Any) -> bool:
        """Add ``key`` unless present; return whether it was added."""
        return self._tree.insert(key, value)

    def insert_or_assign(self, key: Any, value: Any) -> bool:
        """Store ``value`` under ``key``; return True if the key was new."""
        node = self._tree.find(key)
        if node is None:
            return self._tree.insert(key, value)
        node.value = value
        return False

    def erase(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if absent."""
        if not self._tree.remove(key):
            raise KeyError(key)

    def merge(self, other: SortedMap) -> None:
        """Insert every entry of ``other`` whose key is new, then empty ``other``."""
        if other is self:
            return
        for node in other._tree:
            self._tree.insert(node.key, node.value)
        other.clear()

    def swap(self, other: SortedMap) -> None:
        self._tree, other._tree = other._tree, self._tree

    def clear(self) -> None:
        self._tree.clear()

    def max_size(self) -> int:
        """Return the largest number of entries the map could hold."""
        return 2**64 - 1

    def copy(self) -> SortedMap:
        twin = type(self)()
        twin._tree = self._tree.copy()
        return twin

    def take(self) -> SortedMap:
        """Return a new map with these contents, leaving this one empty."""
        taken = type(self)()
        taken.swap(self)
        return taken