"""
Abstract base classes for sorted sets.
"""

from rbtree.interfaces.range_iterable import RangeIterable
from rbtree.interfaces.sorted_set import SortedSet

__all__ = ["RangeIterable", "SortedSet"]
