"""Tests for the sparse (doubling) table."""

import numpy as np
import pytest

from rmqlca.rmq import EARLIER, LATER
from rmqlca.sparse_table import SparseTable


class TestSparseTable:

    def test_sample_ranges(self, sample_array):
        rmq = SparseTable(sample_array)
        assert rmq.query(0, 3) == 1
        assert rmq.query(0, 6) == 3
        assert rmq.query(3, 8) == 6
        assert rmq.query(0, 10) == 6

    def test_log_table(self):
        rmq = SparseTable(list(range(17)))
        assert rmq.log[1] == 0
        assert rmq.log[2] == 1
        assert rmq.log[3] == 1
        assert rmq.log[8] == 3
        assert rmq.log[17] == 4

    def test_rows_cover_power_of_two_windows(self):
        rmq = SparseTable(list(range(10)))
        # windows of length 1, 2, 4, 8
        assert len(rmq.table) == 4
        assert [len(row) for row in rmq.table] == [10, 9, 7, 3]
        assert rmq.stats()['rows'] == 4

    def test_single_element(self):
        rmq = SparseTable([42])
        assert rmq.query(0, 1) == 0

    def test_ties(self):
        values = [1, 1, 1, 1, 1, 1]
        assert SparseTable(values).query(0, 3) == 2
        assert SparseTable(values).query(2, 6) == 5
        assert SparseTable(values, tie_break=EARLIER).query(2, 6) == 2

    @pytest.mark.parametrize("tie_break", [LATER, EARLIER])
    def test_all_ranges_match_brute_force(self, random_array, brute, tie_break):
        rmq = SparseTable(random_array, tie_break=tie_break)
        n = len(random_array)
        for u in range(n):
            for v in range(u + 1, n + 1):
                assert rmq.query(u, v) == brute[tie_break](random_array, u, v)

    def test_string_values(self):
        rmq = SparseTable(["pear", "apple", "fig", "banana"])
        assert rmq.query(0, 4) == 1
        assert rmq.query(2, 4) == 3

    def test_float_values(self):
        rmq = SparseTable(np.array([0.5, -1.25, 3.0, -1.5]))
        assert rmq.query(0, 3) == 1
        assert rmq.min_value(0, 4) == -1.5
