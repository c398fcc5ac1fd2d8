"""Classic container types: a doubly linked list, an AVL tree and a sorted map."""

__version__ = "0.1.0"
__all__ = ["avl_tree", "linked_list", "sorted_map"]