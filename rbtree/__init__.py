"""
Persistent red-black tree.

This package provides an immutable ordered set of unique keys with:
- insert(key, tree) - O(log N), returns a new tree
- delete(key, tree) - O(log N), returns a new tree
- is_member(key, tree) - O(log N)
- pre/in/post/level-order traversals, fold and range iteration
- is_valid(tree) - checks the red-black invariants

Old versions of a tree are never modified, so they can be shared freely.
"""

from rbtree.engine import (
    black_height,
    delete,
    flatten,
    fold,
    from_list,
    height,
    in_order,
    insert,
    is_member,
    is_valid,
    iter_range,
    level_order,
    maximum,
    minimum,
    post_order,
    pre_order,
    size,
    validate,
    violations,
)
from rbtree.models import (
    EMPTY,
    Color,
    InvalidTreeError,
    Leaf,
    Node,
    Tree,
    empty,
    singleton,
)
from rbtree.models.sortedcontainers import RedBlackSet

__all__ = [
    "Color",
    "EMPTY",
    "InvalidTreeError",
    "Leaf",
    "Node",
    "RedBlackSet",
    "Tree",
    "black_height",
    "delete",
    "empty",
    "flatten",
    "fold",
    "from_list",
    "height",
    "in_order",
    "insert",
    "is_member",
    "is_valid",
    "iter_range",
    "level_order",
    "maximum",
    "minimum",
    "post_order",
    "pre_order",
    "singleton",
    "size",
    "validate",
    "violations",
]
