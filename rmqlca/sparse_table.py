"""
Sparse Table Implementation for O(1) Range Minimum Queries

This module provides:
- The "doubling" table of argmins over all power-of-two windows
- O(n log n) preprocessing, O(1) query time
- The RMQ structure BlockRMQ uses over its block minima
"""

import logging
from typing import Dict, List, Sequence

import numpy as np

from rmqlca.rmq import LATER, RangeMinimumQuery, pick

logger = logging.getLogger(__name__)


class SparseTable(RangeMinimumQuery):
    """
    Sparse Table for Range Minimum Query (RMQ).

    Row d holds, for every start i with i + 2^d <= n, the argmin of
    [i, i + 2^d). Any range is covered exactly by two overlapping windows
    of the same row.

    Preprocessing: O(n log n)
    Query: O(1)
    """

    def __init__(self, sequence: Sequence, tie_break: str = LATER):
        """
        Initialize sparse table for RMQ.

        Args:
            sequence: Input values (n >= 1)
            tie_break: LATER or EARLIER
        """
        super().__init__(sequence, tie_break)
        n = len(self.values)

        # Precompute log values
        self.log = [0] * (n + 1)
        for i in range(2, n + 1):
            self.log[i] = self.log[i // 2] + 1

        # Initialize first row (intervals of length 1)
        self.table: List[np.ndarray] = [np.arange(n, dtype=np.intp)]

        # Row j combines windows of length 2^(j-1) that are 2^(j-1) apart
        j = 1
        while (1 << j) <= n:
            prev = self.table[j - 1]
            half = 1 << (j - 1)
            self.table.append(pick(self.values, prev[:-half], prev[half:], self.tie_break))
            j += 1

        logger.debug(f"SparseTable built: n={n}, rows={len(self.table)}")

    def query(self, u: int, v: int) -> int:
        """
        Query the minimum in range [u, v).

        Args:
            u: Left index (inclusive)
            v: Right index (exclusive), v > u

        Returns:
            Index with minimum value in range [u, v)
        """
        self._check_range(u, v)

        # Find k such that 2^k <= (v - u)
        k = self.log[v - u]

        # Query overlapping intervals
        left = int(self.table[k][u])
        right = int(self.table[k][v - (1 << k)])
        return self._winner(left, right)

    def stats(self) -> Dict:
        stats = super().stats()
        stats['rows'] = len(self.table)
        return stats
