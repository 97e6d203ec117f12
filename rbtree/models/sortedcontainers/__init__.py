"""
Sorted container implementations.
"""

from rbtree.models.sortedcontainers.red_black_set import RedBlackSet

__all__ = ["RedBlackSet"]
