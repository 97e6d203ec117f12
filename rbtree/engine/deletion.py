"""
Deletion with double-black bookkeeping.

Physically removing a black node leaves its path one black short. Instead of
rotating immediately, the shortfall is recorded in the tree itself: the hole
becomes a DoubleLeaf (or a node turns DOUBLE_BLACK) and every level on the
way back up passes through bubble(). Each level either absorbs the extra
blackness in balance() or hands it to its parent one level higher. Whatever
reaches the root is discarded when the root is forced black.
"""

from typing import Any

from rbtree.engine.balance import bubble
from rbtree.engine.metrics import maximum, minimum
from rbtree.models.color import Color
from rbtree.models.tree import (
    DOUBLE_EMPTY,
    EMPTY,
    DoubleLeaf,
    Node,
    Tree,
    blacken_node,
    is_leaf,
    is_red,
)


def delete(key: Any, tree: Tree) -> Tree:
    """Return a new tree without key. O(log N)

    Deleting an absent key returns an equal tree.
    """
    result = _del(key, tree)
    if isinstance(result, DoubleLeaf):
        return EMPTY
    return blacken_node(result)


def _del(key: Any, tree: Tree) -> Tree:
    if not isinstance(tree, Node):
        return tree

    if key < tree.key:
        return bubble(tree.color, _del(key, tree.left), tree.key, tree.right)
    if key > tree.key:
        return bubble(tree.color, tree.left, tree.key, _del(key, tree.right))
    return remove(tree)


def remove(tree: Tree) -> Tree:
    """Remove the root node of tree, leaving any deficiency for the caller to bubble."""
    if not isinstance(tree, Node):
        return tree

    left, right = tree.left, tree.right

    if is_leaf(left) and is_leaf(right):
        if tree.color == Color.RED:
            return EMPTY
        return DOUBLE_EMPTY

    if tree.color == Color.BLACK:
        if is_leaf(left) and is_red(right):
            return blacken_node(right)
        if is_red(left) and is_leaf(right):
            return blacken_node(left)

    if isinstance(left, Node):
        return bubble(tree.color, remove_max(left), maximum(left), right)

    # Empty left side with a non-red right child: malformed input only.
    return bubble(tree.color, left, minimum(right), remove_min(right))


def remove_max(tree: Tree) -> Tree:
    """Strip the largest key out of tree."""
    if not isinstance(tree, Node):
        return tree
    if not isinstance(tree.right, Node):
        return remove(tree)
    return bubble(tree.color, tree.left, tree.key, remove_max(tree.right))


def remove_min(tree: Tree) -> Tree:
    """Strip the smallest key out of tree."""
    if not isinstance(tree, Node):
        return tree
    if not isinstance(tree.left, Node):
        return remove(tree)
    return bubble(tree.color, remove_min(tree.left), tree.key, tree.right)
