"""
Tests for the RedBlackSet facade.
"""

import logging

import pytest

from rbtree import EMPTY, InvalidTreeError, Node, RedBlackSet, from_list
from rbtree.interfaces import RangeIterable, SortedSet
from rbtree.models import Color


class TestRedBlackSet:
    """Tests for RedBlackSet sorted set."""

    def test_implements_interfaces(self):
        assert isinstance(RedBlackSet(), SortedSet)
        assert isinstance(RedBlackSet(), RangeIterable)

    def test_empty(self):
        """Test a new set is empty."""
        rbs = RedBlackSet()
        assert rbs.size() == 0
        assert len(rbs) == 0
        assert not rbs
        assert rbs.tree is EMPTY
        assert rbs.maximum() is None

    def test_insert_and_has(self):
        """Test basic insert and membership."""
        rbs = RedBlackSet().insert("key1").insert("key2")

        assert rbs.has("key1")
        assert "key2" in rbs
        assert "key3" not in rbs
        assert rbs.size() == 2

    def test_insert_returns_new_set(self):
        """Test the receiver is unchanged by insert."""
        before = RedBlackSet([1, 2])
        after = before.insert(3)

        assert list(before) == [1, 2]
        assert list(after) == [1, 2, 3]

    def test_duplicate_insert_returns_self(self, sample_set):
        """Test inserting a present key returns the same set."""
        assert sample_set.insert("alpha") is sample_set
        assert sample_set.size() == 5

    def test_delete(self, sample_set):
        """Test delete operation."""
        smaller = sample_set.delete("charlie")

        assert not smaller.has("charlie")
        assert smaller.size() == 4
        assert sample_set.has("charlie")
        assert smaller.is_valid()

    def test_delete_absent_returns_self(self, sample_set):
        assert sample_set.delete("zulu") is sample_set

    def test_noops_are_logged(self, sample_set, caplog):
        """Test duplicate inserts and absent deletes log at DEBUG."""
        caplog.set_level(logging.DEBUG, logger="rbtree")
        sample_set.insert("alpha")
        sample_set.delete("zulu")

        assert "Insert of existing key 'alpha' is a no-op" in caplog.text
        assert "Delete of absent key 'zulu' is a no-op" in caplog.text

    def test_iteration(self, sample_set):
        """Test sorted iteration."""
        assert list(sample_set) == ["alpha", "bravo", "charlie", "delta", "echo"]

    def test_range_iteration(self):
        """Test range iteration."""
        rbs = RedBlackSet(f"key{i:02d}" for i in range(10))

        # Range [key03, key07)
        assert list(rbs.iterator("key03", "key07")) == ["key03", "key04", "key05", "key06"]

    def test_iterations_are_independent(self, sample_set):
        """Test two iterators over one set do not interfere."""
        first = iter(sample_set)
        second = iter(sample_set)
        assert next(first) == "alpha"
        assert next(first) == "bravo"
        assert next(second) == "alpha"

    async def test_async_iteration(self, sample_set):
        """Test async iteration yields sorted keys."""
        keys = [key async for key in sample_set]
        assert keys == ["alpha", "bravo", "charlie", "delta", "echo"]

    async def test_async_range_iteration(self, sample_set):
        keys = [key async for key in sample_set.async_iterator("bravo", "delta")]
        assert keys == ["bravo", "charlie"]

    def test_traversals(self):
        """Test traversal methods delegate to the tree."""
        rbs = RedBlackSet([2, 5, 6, 7, 1, 8, 4, 3])

        assert rbs.pre_order() == [5, 3, 2, 1, 4, 7, 6, 8]
        assert rbs.in_order() == [1, 2, 3, 4, 5, 6, 7, 8]
        assert rbs.post_order() == [1, 2, 4, 3, 6, 8, 7, 5]
        assert rbs.level_order() == [5, 3, 7, 2, 4, 6, 8, 1]
        assert rbs.flatten() == rbs.in_order()
        assert rbs.fold(lambda key, acc: acc + key, 0) == 36

    def test_metrics(self):
        rbs = RedBlackSet([2, 7, 4, 9, 1, 3, 18, 10])

        assert rbs.black_height() == 2
        assert rbs.height() == 4
        assert rbs.minimum() == 1
        assert rbs.maximum() == 18

    def test_from_tree(self):
        """Test wrapping an existing tree keeps it by reference."""
        tree = from_list(range(20))
        rbs = RedBlackSet.from_tree(tree)

        assert rbs.tree is tree
        assert rbs.size() == 20

    def test_validate_hand_built_tree(self):
        """Test validate() surfaces invariant violations."""
        rbs = RedBlackSet.from_tree(Node(8, Color.RED, EMPTY, EMPTY))

        assert not rbs.is_valid()
        with pytest.raises(InvalidTreeError):
            rbs.validate()

    def test_equality(self):
        """Test sets built the same way are equal and hash alike."""
        a = RedBlackSet([3, 1, 2])
        b = RedBlackSet([1, 2, 3])

        assert a == b
        assert hash(a) == hash(b)
        assert a != RedBlackSet([1, 2])
        assert a != [1, 2, 3]

    def test_repr(self):
        assert repr(RedBlackSet([2, 1])) == "RedBlackSet([1, 2])"

    def test_rejects_non_iterable(self):
        with pytest.raises(TypeError):
            RedBlackSet(5)

    def test_random_operations_against_set(self, rng):
        """Test the facade against Python's built-in set."""
        rbs = RedBlackSet()
        reference = set()

        for _ in range(2000):
            key = rng.randrange(300)
            if rng.random() < 0.6:
                rbs = rbs.insert(key)
                reference.add(key)
            else:
                rbs = rbs.delete(key)
                reference.discard(key)

            assert rbs.size() == len(reference)

        rbs.validate()
        assert list(rbs) == sorted(reference)
