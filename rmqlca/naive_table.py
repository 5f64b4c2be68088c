"""
Naive Table RMQ

Precomputes the answer for every (start, length) pair.

Preprocessing: O(n²)
Query: O(1)

Only meant for short inputs, such as the normalized blocks of BlockRMQ.
"""

from typing import Dict, List, Sequence

import numpy as np

from rmqlca.rmq import LATER, RangeMinimumQuery, pick


class NaiveTable(RangeMinimumQuery):
    """
    RMQ by dynamic programming over (length, start).

    table[L - 1][i] is the argmin of the window [i, i + L).
    """

    def __init__(self, sequence: Sequence, tie_break: str = LATER):
        super().__init__(sequence, tie_break)
        n = len(self.values)

        # Windows of length 1 answer themselves
        self.table: List[np.ndarray] = [np.arange(n, dtype=np.intp)]

        # A window of length L + 1 at i overlaps the length-L windows at i and i + 1
        for _ in range(1, n):
            prev = self.table[-1]
            self.table.append(pick(self.values, prev[:-1], prev[1:], self.tie_break))

    def query(self, u: int, v: int) -> int:
        self._check_range(u, v)
        return int(self.table[v - u - 1][u])

    def stats(self) -> Dict:
        stats = super().stats()
        stats['table_entries'] = sum(len(row) for row in self.table)
        return stats
