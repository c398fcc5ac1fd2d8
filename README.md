# containerkit

Classic container types written in plain Python:

- `containerkit.linked_list.LinkedList` is a doubly linked list built around a
  sentinel node. It has `push_front`/`push_back`, `pop_front`/`pop_back`,
  `front`/`back`, positional `insert` and `erase`, `splice`, `merge`,
  `unique`, `reverse` and an in-place `sort`.
- `containerkit.avl_tree.AVLTree` is a self-balancing binary search tree of
  key/value `Node`s with parent links. Iterating over it yields the nodes in
  ascending key order; `reversed()` yields them in descending order.
- `containerkit.sorted_map.SortedMap` is an ordered map with unique keys,
  backed by `AVLTree`.

## Installation

```
pip install containerkit
```

There are no runtime dependencies. To run the tests:

```
pip install "containerkit[test]"
pytest
```

## LinkedList

```python
from containerkit.linked_list import LinkedList

items = LinkedList([8, 1, 4, 9])
items.sort()
print(list(items))          # [1, 4, 8, 9]
items.push_front(0)
print(items.front())        # 0
print(items.insert(2, 13))  # 2: the position of the new element
print(items.erase(2))       # 13: erase returns the removed value

zeros = LinkedList.with_size(3, 0)
print(list(zeros))          # [0, 0, 0]
```

- Indexing (`items[i]`, `insert`, `erase`) walks from whichever end is
  nearer; negative indexes count from the end. An index out of range raises
  `IndexError`, and so do `front`, `back`, `pop_front` and `pop_back` on an
  empty list.
- `insert(len(items), value)` appends.
- `splice(index, other)` moves every element of `other` in before `index`
  and leaves `other` empty. Splicing a list into itself raises `ValueError`.
- `merge(other)` merges sorted `other` into this sorted list, keeping the
  order stable, and leaves `other` empty.
- `unique()` removes consecutive duplicates only.
- Two lists compare equal when they hold equal elements in the same order.
  Lists are not hashable.

## AVLTree and Node

```python
from containerkit.avl_tree import AVLTree

tree = AVLTree()
for key in [10, 5, 20, 30, 1543]:
    tree.insert(key, str(key))

print([node.key for node in tree])   # [5, 10, 20, 30, 1543]
print(tree.height())                 # 3
print(tree.insert(10, "again"))      # False: the key is already present
print(tree.find(20).value)           # '20'
print(tree.min_node().successor())   # Node(10, '10')
print(tree.remove(99))               # False: nothing to remove
print(tree.render())
```

- `insert` and `remove` return whether the tree changed. Inserting an
  existing key leaves its value as it was.
- `find` returns the `Node` or `None`; `min_node` and `max_node` return
  `None` for an empty tree.
- `Node.successor()` and `Node.predecessor()` step to the neighbouring key
  and return `None` at either end.
- `copy()` returns an independent tree with the same shape.
- `render()` draws the top five levels of the tree, one node per line, with
  `L----` for left children and `R----` for right children.

## SortedMap

```python
from containerkit.sorted_map import SortedMap

ages = SortedMap([("bob", 31), ("alice", 27), ("bob", 99)])
print(list(ages))                    # ['alice', 'bob']
print(ages["bob"])                   # 31: the first value given for a key stays
print(ages.insert("alice", 50))      # False: key already present
ages["alice"] = 28                   # insert_or_assign
print(ages.at("alice"))              # 28
print(ages.get_or_insert("carol", 40))  # 40, now stored
print(ages.first(), ages.last())     # ('alice', 28) ('carol', 40)
ages.erase("bob")
print(dict(ages.items()))            # {'alice': 28, 'carol': 40}
```

- A `SortedMap` can be built from a mapping or from an iterable of
  key/value pairs.
- Reading an absent key with `[]` or `at`, and `erase` of an absent key,
  raise `KeyError`; so do `first` and `last` on an empty map.
- `merge(other)` adds every entry of `other` whose key is new, keeps the
  existing values for keys already present, and then empties `other`.
- Iteration yields keys in ascending order; `items()` and `values()` follow
  the same order.

## Copying, moving and swapping

Every container here has `copy()`, which returns an independent copy. 
`LinkedList` and `SortedMap` also have `take()`, which moves the contents
into a new container and leaves the original empty, and `swap(other)`, which
exchanges contents with another container of the same kind.

## What this package does not include

Only the three types above are provided. There is no stack, queue,
growable array or ordered set type; build those on `LinkedList` or
`AVLTree` if you need them. There is no command-line program.