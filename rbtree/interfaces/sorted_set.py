"""
SortedSet abstract base class for persistent ordered sets.
"""

from abc import abstractmethod
from typing import Any

from rbtree.interfaces.range_iterable import RangeIterable


class SortedSet(RangeIterable):
    """
    Abstract base class for persistent, sorted sets of unique keys.

    "Persistent" means updates never touch the receiver: insert() and
    delete() return a new set and the old one keeps answering queries as
    before.

    Implementations:
    - RedBlackSet: red-black tree with O(log N) worst-case updates
    """

    @abstractmethod
    def insert(self, key: Any) -> "SortedSet":
        """
        Return a set that also contains key.

        Args:
            key: The key to add. Must be comparable with the existing keys.

        Returns:
            A new set, or this set if key was already present.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> "SortedSet":
        """
        Return a set without key.

        Args:
            key: The key to remove.

        Returns:
            A new set, or this set if key was absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of keys.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def maximum(self) -> Any | None:
        """Return the largest key, or None if the set is empty."""
        pass

    @abstractmethod
    def minimum(self) -> Any | None:
        """Return the smallest key, or None if the set is empty."""
        pass
