"""Tests for the Cartesian-tree RMQ."""

import numpy as np
import pytest

from rmqlca.cartesian_rmq import NO_CHILD, CartesianRMQ, build_cartesian_tree
from rmqlca.rmq import EARLIER, LATER
from rmqlca.sparse_table import SparseTable


def inorder(root, left, right):
    order = []
    stack = []
    node = root
    while stack or node != NO_CHILD:
        while node != NO_CHILD:
            stack.append(node)
            node = left[node]
        node = stack.pop()
        order.append(node)
        node = right[node]
    return order


class TestBuildCartesianTree:

    def test_sample_shape(self, sample_array):
        root, left, right = build_cartesian_tree(sample_array)
        # 1 at index 6 is the global minimum
        assert root == 6
        assert left[6] == 3
        assert right[6] == 8
        assert left[3] == 1
        assert right[3] == 4

    @pytest.mark.parametrize("tie_break", [LATER, EARLIER])
    def test_inorder_and_heap_order(self, random_array, tie_break):
        root, left, right = build_cartesian_tree(random_array, tie_break)
        assert inorder(root, left, right) == list(range(len(random_array)))
        for i in range(len(random_array)):
            for child in (left[i], right[i]):
                if child != NO_CHILD:
                    assert random_array[i] <= random_array[child]

    def test_equal_values_not_popped_by_default(self):
        root, left, right = build_cartesian_tree([1, 1])
        assert root == 0
        assert right[0] == 1

    def test_equal_values_popped_under_later(self):
        root, left, right = build_cartesian_tree([1, 1], LATER)
        assert root == 1
        assert left[1] == 0

    def test_new_root_takes_old_root(self):
        root, left, right = build_cartesian_tree([3, 2, 1])
        assert root == 2
        assert left[2] == 1
        assert left[1] == 0

    def test_unknown_tie_break(self):
        with pytest.raises(ValueError):
            build_cartesian_tree([1, 2], 'sideways')


class TestCartesianRMQ:

    def test_sample_ranges(self, sample_array):
        rmq = CartesianRMQ(sample_array)
        assert rmq.query(0, 3) == 1
        assert rmq.query(0, 6) == 3
        assert rmq.query(3, 8) == 6
        assert rmq.query(0, 10) == 6

    def test_ties(self):
        values = [3, 1, 1, 1, 4, 5]
        assert CartesianRMQ(values).query(0, 3) == 1
        assert CartesianRMQ(values, tie_break=LATER).query(0, 3) == 2
        assert CartesianRMQ(values, tie_break=LATER).query(0, 6) == 3

    @pytest.mark.parametrize("tie_break", [LATER, EARLIER])
    def test_all_ranges_match_brute_force(self, random_array, brute, tie_break):
        rmq = CartesianRMQ(random_array, tie_break=tie_break)
        n = len(random_array)
        for u in range(n):
            for v in range(u + 1, n + 1):
                assert rmq.query(u, v) == brute[tie_break](random_array, u, v)

    @pytest.mark.parametrize("tie_break", [LATER, EARLIER])
    def test_agrees_with_sparse_table(self, tie_break):
        values = np.random.default_rng(23).normal(size=120)
        values[::7] = 0.0
        cartesian = CartesianRMQ(values, tie_break=tie_break)
        sparse = SparseTable(values, tie_break=tie_break)
        for u in range(len(values)):
            for v in range(u + 1, len(values) + 1):
                assert cartesian.query(u, v) == sparse.query(u, v)

    def test_sorted_inputs_build_deep_trees(self):
        n = 3000
        ascending = CartesianRMQ(np.arange(n))
        assert ascending.query(0, n) == 0
        assert ascending.query(1234, 2000) == 1234
        assert ascending.stats()['max_depth'] == n - 1

        descending = CartesianRMQ(np.arange(n)[::-1])
        assert descending.query(0, n) == n - 1
        assert descending.query(10, 20) == 19

    def test_position_index_covers_all_positions(self, random_array):
        rmq = CartesianRMQ(random_array)
        for i in range(len(random_array)):
            value, position = rmq.tree.value(int(rmq.position_to_node[i]))
            assert position == i
            assert value == random_array[i]

    def test_other_rmq_factory(self, sample_array):
        rmq = CartesianRMQ(sample_array, rmq_factory=SparseTable)
        assert rmq.query(3, 8) == 6

    def test_single_element(self):
        assert CartesianRMQ([7]).query(0, 1) == 0

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            CartesianRMQ([])
