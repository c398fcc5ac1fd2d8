import random

import pytest

from containerkit.avl_tree import AVLTree


def _build(keys):
    tree = AVLTree()
    for key in keys:
        tree.insert(key, key * 10)
    return tree


def _check_structure(node, parent=None):
    """Return subtree height, asserting AVL, ordering and parent invariants."""
    if node is None:
        return 0
    assert node.parent is parent
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key
    left = _check_structure(node.left, node)
    right = _check_structure(node.right, node)
    assert abs(left - right) <= 1
    assert node.height == max(left, right) + 1
    return node.height


def _root(tree):
    node = tree.min_node()
    while node is not None and node.parent is not None:
        node = node.parent
    return node


def test_empty_tree():
    tree = AVLTree()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.min_node() is None
    assert tree.max_node() is None
    assert tree.height() == 0
    assert tree.render() == ""


def test_single_node_tree():
    tree = AVLTree()
    assert tree.insert(1.4, "hello") is True
    assert len(tree) == 1
    assert tree.min_node().key == 1.4
    assert tree.max_node().value == "hello"


def test_iteration_is_sorted():
    keys = [30, 5, 43, 1, 20, 40, 60, 35, 32]
    tree = _build(keys)
    assert [n.key for n in tree] == sorted(keys)
    assert [n.key for n in reversed(tree)] == sorted(keys, reverse=True)
    assert tree.min_node().key == 1
    assert tree.max_node().key == 60


def test_duplicate_insert_keeps_first_value():
    tree = AVLTree()
    assert tree.insert("hello", 1)
    assert not tree.insert("hello", 2)
    assert not tree.insert("hello", 45)
    assert len(tree) == 1
    assert tree.find("hello").value == 1


def test_find():
    tree = _build([10, 5, 20, 30, 1543])
    assert tree.find(30).value == 300
    assert tree.find(7) is None


@pytest.mark.parametrize("seed", range(5))
def test_random_inserts_stay_balanced(seed):
    rng = random.Random(seed)
    keys = rng.sample(range(1000), 200)
    tree = _build(keys)
    assert len(tree) == 200
    assert _check_structure(_root(tree)) == tree.height()
    assert [n.key for n in tree] == sorted(keys)


def test_ascending_inserts_stay_shallow():
    tree = _build(range(1, 128))
    _check_structure(_root(tree))
    assert tree.height() == 7


def test_remove():
    tree = _build([10, 5, 15, 4, 18, 13, 16])
    assert tree.remove(15)
    assert not tree.remove(99)
    assert len(tree) == 6
    assert [n.key for n in tree] == [4, 5, 10, 13, 16, 18]
    _check_structure(_root(tree))


def test_remove_from_empty_tree():
    tree = AVLTree()
    assert tree.remove(3) is False
    assert len(tree) == 0


@pytest.mark.parametrize("seed", range(5))
def test_random_removals_keep_invariants(seed):
    rng = random.Random(seed)
    keys = rng.sample(range(500), 120)
    tree = _build(keys)
    remaining = set(keys)
    for key in rng.sample(keys, 80):
        assert tree.remove(key)
        remaining.discard(key)
        _check_structure(_root(tree))
    assert [n.key for n in tree] == sorted(remaining)
    assert len(tree) == len(remaining)


def test_remove_everything():
    tree = _build([30, 1543])
    tree.remove(1543)
    tree.remove(30)
    assert len(tree) == 0
    assert tree.min_node() is None


def test_successor_and_predecessor_walk():
    keys = [12, 1, 22, 7, 3]
    tree = _build(keys)
    forward = []
    node = tree.min_node()
    while node is not None:
        forward.append(node.key)
        node = node.successor()
    backward = []
    node = tree.max_node()
    while node is not None:
        backward.append(node.key)
        node = node.predecessor()
    assert forward == sorted(keys)
    assert backward == sorted(keys, reverse=True)


def test_copy_is_independent():
    tree = _build([3, 1, 2, 5])
    twin = tree.copy()
    twin.insert(9, 90)
    twin.find(1).value = "changed"
    assert [n.key for n in tree] == [1, 2, 3, 5]
    assert tree.find(1).value == 10
    assert [n.key for n in twin] == [1, 2, 3, 5, 9]
    _check_structure(_root(twin))


def test_clear():
    tree = _build([1, 2, 3])
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []


def test_render_single():
    tree = AVLTree()
    tree.insert(5)
    assert tree.render() == "R----(5)"


def test_render_three_levels():
    tree = _build([2, 1, 3])
    assert tree.render().splitlines() == [
        "R----(2)",
        "     L----(1)",
        "     R----(3)",
    ]


def test_render_limits_depth():
    tree = _build(range(1, 1024))
    lines = tree.render().splitlines()
    assert len(lines) == 2**5 - 1
    assert len(tree) == 1023