"""
Local rebalancing shared by insertion and deletion.

balance() recognises a fixed set of shapes around a single node and rewrites
each of them into one canonical shape:

            y
          /   \\
         x     z
        / \\   / \\
       a   b c   d

with a < x < b < y < c < z < d. The in-order sequence and the black-height
of the neighbourhood are preserved; only colors and links change.

Shapes handled:

- BLACK parent, red child with a red child (four placements). Produced by
  insertion. The rewrite has a RED top and BLACK flanks.
- DOUBLE_BLACK parent, same four placements. Produced by deletion when a
  deficiency bubbles into a node whose sibling side had a red-red pair. The
  rewrite is all BLACK, absorbing the extra blackness.
- DOUBLE_BLACK parent with a NEGATIVE_BLACK child whose two children are
  real BLACK nodes (two mirrored placements). The negative child is split,
  its far child reddened and rebalanced one level down.

Anything else is rebuilt as-is. In particular a NEGATIVE_BLACK child with an
empty grandchild is left alone; only malformed input can reach that, and the
validator reports the result.
"""

from typing import Any

from rbtree.models.color import Color, blacker
from rbtree.models.tree import (
    Node,
    Tree,
    is_black,
    is_double_black,
    is_red,
    redden_node,
    redder_tree,
)


def balance(color: Color, left: Tree, key: Any, right: Tree) -> Tree:
    """Rebuild a node from its parts, fixing any local violation."""
    if color in (Color.BLACK, Color.DOUBLE_BLACK):
        rebuilt = _rotate_red_red(color, left, key, right)
        if rebuilt is not None:
            return rebuilt

    if color == Color.DOUBLE_BLACK:
        rebuilt = _absorb_negative_black(left, key, right)
        if rebuilt is not None:
            return rebuilt

    return Node(key, color, left, right)


def bubble(color: Color, left: Tree, key: Any, right: Tree) -> Tree:
    """
    Rebuild a node after one of its children was rewritten by a delete.

    If either child came back double black, move one shade of blackness from
    the children up into this node, then let balance() try to absorb it here.
    """
    if is_double_black(left) or is_double_black(right):
        return balance(blacker(color), redder_tree(left), key, redder_tree(right))
    return balance(color, left, key, right)


def _rotate_red_red(color: Color, left: Tree, key: Any, right: Tree) -> Node | None:
    """Rewrite a red child with a red child into the canonical shape."""
    if is_red(left) and is_red(left.left):
        # left-left
        a, x, b = left.left.left, left.left.key, left.left.right
        y, c = left.key, left.right
        z, d = key, right
    elif is_red(left) and is_red(left.right):
        # left-right
        a, x = left.left, left.key
        b, y, c = left.right.left, left.right.key, left.right.right
        z, d = key, right
    elif is_red(right) and is_red(right.left):
        # right-left
        a, x = left, key
        b, y, c = right.left.left, right.left.key, right.left.right
        z, d = right.key, right.right
    elif is_red(right) and is_red(right.right):
        # right-right
        a, x = left, key
        b, y = right.left, right.key
        c, z, d = right.right.left, right.right.key, right.right.right
    else:
        return None

    top = Color.RED if color == Color.BLACK else Color.BLACK
    return Node(y, top, Node(x, Color.BLACK, a, b), Node(z, Color.BLACK, c, d))


def _absorb_negative_black(left: Tree, key: Any, right: Tree) -> Node | None:
    """Resolve a DOUBLE_BLACK parent over a NEGATIVE_BLACK child."""
    if (
        isinstance(right, Node)
        and right.color == Color.NEGATIVE_BLACK
        and is_black(right.left)
        and is_black(right.right)
    ):
        a, x = left, key
        b, y, c = right.left.left, right.left.key, right.left.right
        z, d = right.key, right.right
        return Node(
            y,
            Color.BLACK,
            Node(x, Color.BLACK, a, b),
            balance(Color.BLACK, c, z, redden_node(d)),
        )

    if (
        isinstance(left, Node)
        and left.color == Color.NEGATIVE_BLACK
        and is_black(left.left)
        and is_black(left.right)
    ):
        a, x = left.left, left.key
        b, y, c = left.right.left, left.right.key, left.right.right
        z, d = key, right
        return Node(
            y,
            Color.BLACK,
            balance(Color.BLACK, redden_node(a), x, b),
            Node(z, Color.BLACK, c, d),
        )

    return None
