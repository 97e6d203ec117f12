"""
Data models for the red-black tree.
"""

from rbtree.models.color import Color, blacker, redder
from rbtree.models.exceptions import InvalidTreeError
from rbtree.models.tree import (
    DOUBLE_EMPTY,
    EMPTY,
    DoubleLeaf,
    Leaf,
    Node,
    Tree,
    blacken_node,
    blacker_tree,
    empty,
    is_double_black,
    redden_node,
    redder_tree,
    singleton,
)

__all__ = [
    "Color",
    "DOUBLE_EMPTY",
    "DoubleLeaf",
    "EMPTY",
    "InvalidTreeError",
    "Leaf",
    "Node",
    "Tree",
    "blacken_node",
    "blacker",
    "blacker_tree",
    "empty",
    "is_double_black",
    "redden_node",
    "redder",
    "redder_tree",
    "singleton",
]
