"""
RangeIterable protocol for sorted sets that support range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over a range of keys.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end)

    Every call returns a fresh iterator, so iterating never changes the
    iterable and two iterations can run side by side.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all keys in sorted order."""
        pass

    @abstractmethod
    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        """
        Return an iterator over keys in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding keys in sorted order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all keys in sorted order."""
        pass

    @abstractmethod
    def async_iterator(self, start: Any = None, end: Any = None) -> AsyncIterator[Any]:
        """
        Return an async iterator over keys in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            AsyncIterator yielding keys in sorted order.
        """
        pass
