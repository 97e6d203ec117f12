"""
Red-black invariant checks.

Properties checked:
1. Binary-search order (and no DoubleLeaf anywhere)
2. Root is black
3. Red nodes cannot have red children
4. Every path from root to leaf has the same number of black nodes
5. Only RED and BLACK colors appear

Each check is independent of the insertion and deletion code, so the
validator can be used to prove their output correct.
"""

import logging
from typing import Any

from rbtree.engine.metrics import black_height
from rbtree.models.color import Color
from rbtree.models.exceptions import InvalidTreeError
from rbtree.models.tree import DoubleLeaf, Leaf, Node, Tree, is_red

logger = logging.getLogger(__name__)


def binary_search_order(tree: Tree) -> bool:
    """Every key lies strictly between the bounds set by its ancestors."""
    return _ordered(tree, None, None)


def _ordered(tree: Tree, low: Any, high: Any) -> bool:
    if isinstance(tree, DoubleLeaf):
        return False
    if not isinstance(tree, Node):
        return True
    if low is not None and not low < tree.key:
        return False
    if high is not None and not tree.key < high:
        return False
    return _ordered(tree.left, low, tree.key) and _ordered(tree.right, tree.key, high)


def black_root(tree: Tree) -> bool:
    if isinstance(tree, Leaf):
        return True
    return isinstance(tree, Node) and tree.color == Color.BLACK


def no_red_red(tree: Tree) -> bool:
    if not isinstance(tree, Node):
        return True
    if is_red(tree) and (is_red(tree.left) or is_red(tree.right)):
        return False
    return no_red_red(tree.left) and no_red_red(tree.right)


def only_red_black(tree: Tree) -> bool:
    """No transient DOUBLE_BLACK or NEGATIVE_BLACK node survives."""
    if not isinstance(tree, Node):
        return True
    if tree.color not in (Color.RED, Color.BLACK):
        return False
    return only_red_black(tree.left) and only_red_black(tree.right)


def violations(tree: Tree) -> list[str]:
    """Return one message per failed check; empty for a valid tree."""
    found = []
    if not binary_search_order(tree):
        found.append("binary-search order violated")
    if not black_root(tree):
        found.append("root is not black")
    if not no_red_red(tree):
        found.append("red node has a red child")
    if black_height(tree) is None:
        found.append("black-height differs between paths")
    if not only_red_black(tree):
        found.append("transient double-black or negative-black color present")
    return found


def is_valid(tree: Tree) -> bool:
    found = violations(tree)
    for message in found:
        logger.debug(f"Invalid tree: {message}")
    return not found


def validate(tree: Tree) -> None:
    """
    Verify that the tree satisfies all red-black invariants.

    Raises:
        InvalidTreeError: listing every failed check.
    """
    found = violations(tree)
    if found:
        raise InvalidTreeError(found)
