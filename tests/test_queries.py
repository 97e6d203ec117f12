"""
Tests for traversals, fold, range iteration and metric queries.
"""

from rbtree.engine import (
    aiter_range,
    black_height,
    flatten,
    fold,
    from_list,
    height,
    in_order,
    is_member,
    iter_range,
    level_order,
    maximum,
    minimum,
    post_order,
    pre_order,
    size,
)
from rbtree.models import DOUBLE_EMPTY, EMPTY, Color, Node, singleton


class TestTraversal:
    """Tests for the four traversal orders."""

    def test_pre_order(self, traversal_tree):
        assert pre_order(traversal_tree) == [5, 3, 2, 1, 4, 7, 6, 8]

    def test_in_order(self, traversal_tree):
        assert in_order(traversal_tree) == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_post_order(self, traversal_tree):
        assert post_order(traversal_tree) == [1, 2, 4, 3, 6, 8, 7, 5]

    def test_level_order(self, traversal_tree):
        assert level_order(traversal_tree) == [5, 3, 7, 2, 4, 6, 8, 1]

    def test_flatten_is_in_order(self, traversal_tree):
        assert flatten(traversal_tree) == in_order(traversal_tree)

    def test_empty_tree(self):
        """Test every traversal of an empty tree is empty."""
        for traverse in (pre_order, in_order, post_order, level_order, flatten):
            assert traverse(EMPTY) == []

    def test_restartable(self, traversal_tree):
        """Test traversals return fresh lists each call."""
        first = in_order(traversal_tree)
        first.append(99)
        assert in_order(traversal_tree) == [1, 2, 3, 4, 5, 6, 7, 8]


class TestFold:
    """Tests for fold()."""

    def test_fold_runs_right_to_left(self, traversal_tree):
        """Test keys reach combine from largest to smallest."""
        seen = fold(lambda key, acc: acc + [key], [], traversal_tree)
        assert seen == [8, 7, 6, 5, 4, 3, 2, 1]

    def test_fold_cons_rebuilds_in_order(self, traversal_tree):
        """Test prepending each key reproduces the sorted keys."""
        assert fold(lambda key, acc: [key] + acc, [], traversal_tree) == in_order(traversal_tree)

    def test_fold_sum(self):
        assert fold(lambda key, acc: key + acc, 0, from_list(range(10))) == 45

    def test_fold_empty_returns_seed(self):
        assert fold(lambda key, acc: acc + 1, "seed", EMPTY) == "seed"


class TestRangeIteration:
    """Tests for bounded iteration."""

    def test_full_range(self, traversal_tree):
        assert list(iter_range(traversal_tree)) == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_bounded_range(self, traversal_tree):
        """Test [start, end) bounds."""
        assert list(iter_range(traversal_tree, 3, 7)) == [3, 4, 5, 6]

    def test_bounds_between_keys(self):
        tree = from_list(range(0, 20, 2))
        assert list(iter_range(tree, 3, 9)) == [4, 6, 8]

    def test_open_ended(self, traversal_tree):
        assert list(iter_range(traversal_tree, start=6)) == [6, 7, 8]
        assert list(iter_range(traversal_tree, end=3)) == [1, 2]

    def test_empty_range(self, traversal_tree):
        assert list(iter_range(traversal_tree, 5, 5)) == []
        assert list(iter_range(EMPTY, 0, 10)) == []

    def test_string_keys(self):
        """Test range iteration over string keys."""
        tree = from_list(f"key{i:02d}" for i in range(10))
        assert list(iter_range(tree, "key03", "key07")) == ["key03", "key04", "key05", "key06"]

    async def test_async_range(self, traversal_tree):
        """Test the async iterator yields the same keys."""
        keys = [key async for key in aiter_range(traversal_tree, 2, 6)]
        assert keys == [2, 3, 4, 5]


class TestMetrics:
    """Tests for membership, size, height and extremes."""

    def test_is_member(self, traversal_tree):
        for key in range(1, 9):
            assert is_member(key, traversal_tree)
        assert not is_member(0, traversal_tree)
        assert not is_member(9, traversal_tree)
        assert not is_member(1, EMPTY)

    def test_size(self, random_sequences):
        """Test size counts distinct keys."""
        for seq in random_sequences:
            assert size(from_list(seq)) == len(set(seq))

    def test_height(self, traversal_tree):
        assert height(EMPTY) == 0
        assert height(singleton(1)) == 1
        assert height(traversal_tree) == 4

    def test_black_height(self):
        """Test black-height of a known tree."""
        assert black_height(from_list([2, 7, 4, 9, 1, 3, 18, 10])) == 2
        assert black_height(EMPTY) == 0
        assert black_height(singleton(1)) == 1

    def test_black_height_mismatch(self):
        """Test unequal paths give None."""
        tree = Node(2, Color.BLACK, Node(1, Color.BLACK, EMPTY, EMPTY), EMPTY)
        assert black_height(tree) is None

    def test_black_height_transient_colors(self):
        """Test transient colors carry their weights."""
        assert black_height(DOUBLE_EMPTY) == 1
        assert black_height(Node(1, Color.DOUBLE_BLACK, EMPTY, EMPTY)) == 2
        assert black_height(Node(1, Color.NEGATIVE_BLACK, EMPTY, EMPTY)) == -1
        # A double-black leaf node weighs as much as two stacked black nodes
        tree = Node(
            5,
            Color.BLACK,
            Node(2, Color.DOUBLE_BLACK, EMPTY, EMPTY),
            Node(7, Color.BLACK, Node(6, Color.BLACK, EMPTY, EMPTY), Node(8, Color.BLACK, EMPTY, EMPTY)),
        )
        assert black_height(tree) == 3

    def test_height_bounds(self, random_sequences):
        """Test black_height <= height <= 2 * max(1, black_height)."""
        for seq in random_sequences:
            tree = from_list(seq)
            bh = black_height(tree)
            assert bh is not None
            assert bh <= height(tree) <= 2 * max(1, bh)

    def test_maximum_and_minimum(self, traversal_tree):
        assert maximum(traversal_tree) == 8
        assert minimum(traversal_tree) == 1
        assert maximum(EMPTY) is None
        assert minimum(EMPTY) is None
