"""
Shared pytest fixtures for red-black tree tests.
"""

import logging
import random

import pytest

from rbtree import RedBlackSet, from_list


@pytest.fixture
def rng():
    """Provide a seeded random generator so failures are reproducible."""
    return random.Random(12345)


@pytest.fixture
def traversal_tree():
    """Provide the tree whose traversal orders are known by heart."""
    return from_list([2, 5, 6, 7, 1, 8, 4, 3])


@pytest.fixture
def four_keys():
    """Provide a small tree with a red leaf on the right."""
    return from_list([1, 2, 3, 4])


@pytest.fixture
def sample_set():
    """Provide a RedBlackSet with a handful of string keys."""
    return RedBlackSet(["delta", "alpha", "echo", "charlie", "bravo"])


@pytest.fixture
def random_sequences(rng):
    """Provide key sequences of assorted lengths, with duplicates."""
    sequences = [[], [0], [1, 1, 1], list(range(64)), list(range(64, 0, -1))]
    for length in (5, 17, 100, 300):
        sequences.append([rng.randrange(length * 2) for _ in range(length)])
    return sequences


@pytest.fixture
def restore_root_logger():
    """Put the root logger level back after a test reconfigures it."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)
