"""
Insertion: descend to a leaf, plant a red node, rebalance on the way up.
"""

from collections.abc import Iterable
from typing import Any

from rbtree.engine.balance import balance
from rbtree.models.color import Color
from rbtree.models.tree import (
    DOUBLE_EMPTY,
    EMPTY,
    DoubleLeaf,
    Leaf,
    Node,
    Tree,
    blacken_node,
)


def insert(key: Any, tree: Tree) -> Tree:
    """Return a new tree containing key. O(log N)

    Inserting a key that is already present returns an equal tree.
    """
    result = ins(key, tree)
    if isinstance(result, DoubleLeaf):
        # Only reachable from a malformed input tree.
        return Node(key, Color.DOUBLE_BLACK, DOUBLE_EMPTY, DOUBLE_EMPTY)
    return blacken_node(result)


def ins(key: Any, tree: Tree) -> Tree:
    """
    Insert without fixing the root color.

    New nodes start RED. Every level rebuilds its node with the new child and
    runs balance() before returning, which moves a red-red pair up one level
    at a time until it is absorbed or reaches the root.
    """
    if isinstance(tree, Leaf):
        return Node(key, Color.RED, EMPTY, EMPTY)
    if not isinstance(tree, Node):
        return tree

    if key < tree.key:
        return balance(tree.color, ins(key, tree.left), tree.key, tree.right)
    if key > tree.key:
        return balance(tree.color, tree.left, tree.key, ins(key, tree.right))
    return tree


def from_list(keys: Iterable[Any]) -> Tree:
    """Build a tree by inserting keys left to right. Later duplicates are no-ops."""
    tree: Tree = EMPTY
    for key in keys:
        tree = insert(key, tree)
    return tree
