"""
Read-only queries over a tree: membership, counts and extremes.
"""

from typing import Any

from rbtree.models.color import Color
from rbtree.models.tree import DoubleLeaf, Node, Tree

_BLACK_WEIGHT = {
    Color.RED: 0,
    Color.BLACK: 1,
    Color.DOUBLE_BLACK: 2,
    Color.NEGATIVE_BLACK: -1,
}


def is_member(key: Any, tree: Tree) -> bool:
    """Check if key is in the tree. O(log N)"""
    current = tree
    while isinstance(current, Node):
        if key < current.key:
            current = current.left
        elif key > current.key:
            current = current.right
        else:
            return True
    return False


def size(tree: Tree) -> int:
    if not isinstance(tree, Node):
        return 0
    return 1 + size(tree.left) + size(tree.right)


def height(tree: Tree) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if not isinstance(tree, Node):
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def black_height(tree: Tree) -> int | None:
    """
    Count black nodes on every root-to-leaf path.

    Returns None when two paths disagree. Transient colors are weighted so a
    tree caught in the middle of a delete can still be diagnosed:
    DOUBLE_BLACK counts 2, NEGATIVE_BLACK counts -1 and a DoubleLeaf counts 1.
    """
    if isinstance(tree, DoubleLeaf):
        return 1
    if not isinstance(tree, Node):
        return 0

    left = black_height(tree.left)
    right = black_height(tree.right)
    if left is None or right is None or left != right:
        return None
    return left + _BLACK_WEIGHT[tree.color]


def maximum(tree: Tree) -> Any | None:
    """Largest key, or None for an empty tree."""
    if not isinstance(tree, Node):
        return None
    current = tree
    while isinstance(current.right, Node):
        current = current.right
    return current.key


def minimum(tree: Tree) -> Any | None:
    """Smallest key, or None for an empty tree."""
    if not isinstance(tree, Node):
        return None
    current = tree
    while isinstance(current.left, Node):
        current = current.left
    return current.key
