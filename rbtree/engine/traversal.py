"""
Traversals, fold and bounded range iteration.

The list-returning traversals are plain recursion over the tree. The range
iterators walk an explicit stack of left spines instead, so they can start
at an arbitrary lower bound and stop early at the upper one.
"""

from collections import deque
from collections.abc import AsyncIterator, Callable, Iterator
from typing import Any, TypeVar

from rbtree.models.tree import Node, Tree

A = TypeVar("A")


def pre_order(tree: Tree) -> list[Any]:
    result: list[Any] = []
    _pre_order(tree, result)
    return result


def _pre_order(tree: Tree, out: list[Any]) -> None:
    if isinstance(tree, Node):
        out.append(tree.key)
        _pre_order(tree.left, out)
        _pre_order(tree.right, out)


def in_order(tree: Tree) -> list[Any]:
    """Keys in ascending order."""
    result: list[Any] = []
    _in_order(tree, result)
    return result


def _in_order(tree: Tree, out: list[Any]) -> None:
    if isinstance(tree, Node):
        _in_order(tree.left, out)
        out.append(tree.key)
        _in_order(tree.right, out)


def post_order(tree: Tree) -> list[Any]:
    result: list[Any] = []
    _post_order(tree, result)
    return result


def _post_order(tree: Tree, out: list[Any]) -> None:
    if isinstance(tree, Node):
        _post_order(tree.left, out)
        _post_order(tree.right, out)
        out.append(tree.key)


def level_order(tree: Tree) -> list[Any]:
    """Breadth-first, left to right within each level."""
    result: list[Any] = []
    queue: deque[Tree] = deque([tree])
    while queue:
        current = queue.popleft()
        if isinstance(current, Node):
            result.append(current.key)
            queue.append(current.left)
            queue.append(current.right)
    return result


def flatten(tree: Tree) -> list[Any]:
    return in_order(tree)


def fold(combine: Callable[[Any, A], A], seed: A, tree: Tree) -> A:
    """
    Fold keys from largest to smallest.

    The right subtree is folded first, its result is combined with the node's
    key, and that accumulator is then folded through the left subtree.
    fold(lambda k, acc: [k] + acc, [], t) therefore equals in_order(t).
    """
    if not isinstance(tree, Node):
        return seed
    acc = fold(combine, seed, tree.right)
    acc = combine(tree.key, acc)
    return fold(combine, acc, tree.left)


def iter_range(tree: Tree, start: Any = None, end: Any = None) -> Iterator[Any]:
    """
    Iterate over keys in [start, end) in ascending order.

    Args:
        tree: The tree to walk.
        start: Start key (inclusive). If None, starts from the smallest key.
        end: End key (exclusive). If None, runs to the largest key.
    """
    return _RangeIterator(tree, start, end)


def aiter_range(tree: Tree, start: Any = None, end: Any = None) -> AsyncIterator[Any]:
    """Async counterpart of iter_range (in-memory, no I/O)."""
    return _AsyncRangeIterator(tree, start, end)


class _RangeIterator(Iterator[Any]):
    """Iterator for range queries over a tree."""

    def __init__(self, root: Tree, start: Any, end: Any) -> None:
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        if self._end is not None and node.key >= self._end:
            self._stack.clear()
            raise StopIteration

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return node.key

    def _push_left_path(self, node: Tree, start: Any) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while isinstance(node, Node):
            if start is not None and node.key < start:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[Any]):
    """Async iterator for range queries over a tree."""

    def __init__(self, root: Tree, start: Any, end: Any) -> None:
        self._inner = _RangeIterator(root, start, end)

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
