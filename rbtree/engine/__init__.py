"""
Pure functions over immutable trees: rebalancing, insertion, deletion,
queries, traversals and validation.
"""

from rbtree.engine.balance import balance, bubble
from rbtree.engine.deletion import delete, remove, remove_max, remove_min
from rbtree.engine.insertion import from_list, ins, insert
from rbtree.engine.metrics import (
    black_height,
    height,
    is_member,
    maximum,
    minimum,
    size,
)
from rbtree.engine.traversal import (
    aiter_range,
    flatten,
    fold,
    in_order,
    iter_range,
    level_order,
    post_order,
    pre_order,
)
from rbtree.engine.validator import (
    binary_search_order,
    black_root,
    is_valid,
    no_red_red,
    only_red_black,
    validate,
    violations,
)

__all__ = [
    "aiter_range",
    "balance",
    "binary_search_order",
    "black_height",
    "black_root",
    "bubble",
    "delete",
    "flatten",
    "fold",
    "from_list",
    "height",
    "in_order",
    "ins",
    "insert",
    "is_member",
    "is_valid",
    "iter_range",
    "level_order",
    "maximum",
    "minimum",
    "no_red_red",
    "only_red_black",
    "post_order",
    "pre_order",
    "remove",
    "remove_max",
    "remove_min",
    "size",
    "validate",
    "violations",
]
