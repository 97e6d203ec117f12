"""
Red-Black Tree backed persistent sorted set.

Every update returns a new RedBlackSet sharing all untouched subtrees with
the one it came from.
"""

import logging
from collections.abc import AsyncIterator, Callable, Iterable, Iterator
from typing import Any

from rbtree.engine import deletion, insertion, metrics, traversal, validator
from rbtree.interfaces.sorted_set import SortedSet
from rbtree.models.tree import EMPTY, Tree

logger = logging.getLogger(__name__)


class RedBlackSet(SortedSet):
    """
    SortedSet implementation over an immutable red-black tree.

    Properties maintained:
    1. Keys are in binary-search order and unique
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from root to leaf has same number of black nodes
    """

    __slots__ = ("_tree", "_size")

    def __init__(self, keys: Iterable[Any] | None = None) -> None:
        """
        Create a set, optionally from an iterable of keys.

        Args:
            keys: Keys to insert left to right. Duplicates are ignored.
        """
        if keys is not None and not isinstance(keys, Iterable):
            raise TypeError(f"keys must be iterable, got {type(keys).__name__}")

        self._tree: Tree = EMPTY if keys is None else insertion.from_list(keys)
        self._size: int = metrics.size(self._tree)

    @classmethod
    def from_tree(cls, tree: Tree) -> "RedBlackSet":
        """Wrap an existing tree without copying it."""
        return cls._wrap(tree, metrics.size(tree))

    @classmethod
    def _wrap(cls, tree: Tree, size: int) -> "RedBlackSet":
        instance = cls.__new__(cls)
        instance._tree = tree
        instance._size = size
        return instance

    @property
    def tree(self) -> Tree:
        return self._tree

    def insert(self, key: Any) -> "RedBlackSet":
        """Return a set that also contains key. O(log N)"""
        if metrics.is_member(key, self._tree):
            logger.debug(f"Insert of existing key {key!r} is a no-op")
            return self
        return self._wrap(insertion.insert(key, self._tree), self._size + 1)

    def delete(self, key: Any) -> "RedBlackSet":
        """Return a set without key. O(log N)"""
        if not metrics.is_member(key, self._tree):
            logger.debug(f"Delete of absent key {key!r} is a no-op")
            return self
        return self._wrap(deletion.delete(key, self._tree), self._size - 1)

    def has(self, key: Any) -> bool:
        return metrics.is_member(key, self._tree)

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def height(self) -> int:
        return metrics.height(self._tree)

    def black_height(self) -> int | None:
        return metrics.black_height(self._tree)

    def maximum(self) -> Any | None:
        return metrics.maximum(self._tree)

    def minimum(self) -> Any | None:
        return metrics.minimum(self._tree)

    def pre_order(self) -> list[Any]:
        return traversal.pre_order(self._tree)

    def in_order(self) -> list[Any]:
        return traversal.in_order(self._tree)

    def post_order(self) -> list[Any]:
        return traversal.post_order(self._tree)

    def level_order(self) -> list[Any]:
        return traversal.level_order(self._tree)

    def flatten(self) -> list[Any]:
        return traversal.flatten(self._tree)

    def fold(self, combine: Callable[[Any, Any], Any], seed: Any) -> Any:
        """Fold keys from largest to smallest; see traversal.fold."""
        return traversal.fold(combine, seed, self._tree)

    def is_valid(self) -> bool:
        return validator.is_valid(self._tree)

    def validate(self) -> None:
        validator.validate(self._tree)

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        return traversal.iter_range(self._tree, start, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(self, start: Any = None, end: Any = None) -> AsyncIterator[Any]:
        return traversal.aiter_range(self._tree, start, end)

    def __eq__(self, other: object) -> bool:
        """Two sets are equal when their trees have the same shape and colors."""
        if not isinstance(other, RedBlackSet):
            return NotImplemented
        return self._tree == other._tree

    def __hash__(self) -> int:
        return hash(self._tree)

    def __repr__(self) -> str:
        keys = ", ".join(repr(key) for key in self)
        return f"RedBlackSet([{keys}])"
