"""
Immutable tree representation.

A tree is one of three frozen dataclasses:

- Leaf: an ordinary empty subtree.
- DoubleLeaf: an empty subtree carrying one extra unit of blackness. Only
  seen while a delete is in flight.
- Node: a key, a color and two child trees.

Nothing here is ever mutated. Insert and delete build new nodes along the
search path and reuse every other subtree by reference, so older versions
of a tree stay intact.
"""

from dataclasses import dataclass, replace
from typing import Any

from rbtree.models.color import Color, blacker, redder


@dataclass(frozen=True)
class Leaf:
    """Empty subtree."""

    def __repr__(self) -> str:
        return "Leaf"


@dataclass(frozen=True)
class DoubleLeaf:
    """Empty subtree that is one black short of its siblings."""

    def __repr__(self) -> str:
        return "DoubleLeaf"


@dataclass(frozen=True)
class Node:
    """Node in the red-black tree."""

    key: Any
    color: Color
    left: "Tree"
    right: "Tree"

    def __repr__(self) -> str:
        return f"Node({self.key!r}, {self.color.name}, {self.left!r}, {self.right!r})"


Tree = Leaf | DoubleLeaf | Node

EMPTY = Leaf()
DOUBLE_EMPTY = DoubleLeaf()


def empty() -> Tree:
    return EMPTY


def singleton(key: Any) -> Tree:
    """Tree holding exactly one key (a black root)."""
    return Node(key, Color.BLACK, EMPTY, EMPTY)


def is_leaf(tree: Tree) -> bool:
    """True for both kinds of empty subtree."""
    return isinstance(tree, (Leaf, DoubleLeaf))


def blacken_node(tree: Tree) -> Tree:
    if isinstance(tree, Node):
        return replace(tree, color=Color.BLACK)
    return tree


def redden_node(tree: Tree) -> Tree:
    if isinstance(tree, Node):
        return replace(tree, color=Color.RED)
    return tree


def blacker_tree(tree: Tree) -> Tree:
    """Darken the top of a tree by one shade; a Leaf becomes a DoubleLeaf."""
    if isinstance(tree, Leaf):
        return DOUBLE_EMPTY
    if isinstance(tree, Node):
        return replace(tree, color=blacker(tree.color))
    return tree


def redder_tree(tree: Tree) -> Tree:
    """Lighten the top of a tree by one shade; a DoubleLeaf becomes a Leaf."""
    if isinstance(tree, DoubleLeaf):
        return EMPTY
    if isinstance(tree, Node):
        return replace(tree, color=redder(tree.color))
    return tree


def is_double_black(tree: Tree) -> bool:
    if isinstance(tree, DoubleLeaf):
        return True
    return isinstance(tree, Node) and tree.color == Color.DOUBLE_BLACK


def is_red(tree: Tree) -> bool:
    return isinstance(tree, Node) and tree.color == Color.RED


def is_black(tree: Tree) -> bool:
    """True only for a real BLACK node, never for an empty subtree."""
    return isinstance(tree, Node) and tree.color == Color.BLACK
