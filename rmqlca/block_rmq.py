"""
Block-Decomposed ±1 RMQ

Linear preprocessing and constant-time queries for sequences whose
adjacent elements differ by exactly one (Euler-tour depth arrays).

Algorithm:
1. Cut the input into blocks of size s = max(1, lg(n) / 2)
2. Record each block's minimum in a "super array" of length ceil(n / s)
3. Normalize each block (subtract its first value) and share one
   NaiveTable between all blocks of the same shape
4. Build a SparseTable over the super array

A ±1 block of length s has at most 2^(s-1) shapes, about sqrt(n), so the
shape tables together stay O(n).
"""

import logging
from typing import Dict, List, Sequence, Tuple

import numpy as np

from rmqlca.naive_table import NaiveTable
from rmqlca.rmq import LATER, RangeMinimumQuery, check_plus_minus_one
from rmqlca.sparse_table import SparseTable

logger = logging.getLogger(__name__)


def block_size_for(n: int) -> int:
    """Block size s = max(1, floor(lg n) / 2), with lg n clamped to >= 1."""
    logn = max(1, n.bit_length() - 1)
    return max(1, logn // 2)


class BlockRMQ(RangeMinimumQuery):
    """
    ±1-restricted RMQ.

    Preprocessing: O(n)
    Query: O(1)

    Queries are answered from at most three candidates: the tail of u's
    block, the blocks strictly between (via the sparse table over block
    minima), and the head of the block holding v - 1.
    """

    def __init__(self, sequence: Sequence, tie_break: str = LATER,
                 validate: bool = False):
        """
        Args:
            sequence: ±1 sequence (n >= 1)
            tie_break: LATER or EARLIER
            validate: Check the ±1 property first (O(n)); a violation
                raises ValueError. Unchecked violations give wrong answers.
        """
        super().__init__(sequence, tie_break)
        if validate:
            check_plus_minus_one(self.values)

        n = len(self.values)
        s = self.block_size = block_size_for(n)
        signed = np.result_type(self.values.dtype, np.int64)

        super_values = []
        super_indices = []

        # shape -> position in self.shape_tables; blocks keep that position
        self.shape_index: Dict[Tuple, int] = {}
        self.shape_tables: List[NaiveTable] = []
        self.block_tables: List[int] = []

        for start in range(0, n, s):
            block = self.values[start:start + s]

            # Brute-force minimum of the block
            if self.tie_break == LATER:
                offset = len(block) - 1 - int(np.argmin(block[::-1]))
            else:
                offset = int(np.argmin(block))
            super_values.append(block[offset])
            super_indices.append(start + offset)

            # Signed, so unsigned input cannot wrap around
            shape = tuple(np.subtract(block, block[0], dtype=signed).tolist())
            if shape not in self.shape_index:
                self.shape_index[shape] = len(self.shape_tables)
                self.shape_tables.append(NaiveTable(np.asarray(shape), self.tie_break))
            self.block_tables.append(self.shape_index[shape])

        self.super_values = np.asarray(super_values)
        self.super_indices = np.asarray(super_indices, dtype=np.intp)
        self.super_table = SparseTable(self.super_values, self.tie_break)

        logger.debug(f"BlockRMQ built: n={n}, block_size={s}, "
                     f"blocks={len(self.block_tables)}, shapes={len(self.shape_tables)}")

    def _block_query(self, block: int, u: int, v: int) -> int:
        """Absolute argmin of [u, v) given as offsets inside one block."""
        table = self.shape_tables[self.block_tables[block]]
        return block * self.block_size + table.query(u, v)

    def query(self, u: int, v: int) -> int:
        self._check_range(u, v)
        s = self.block_size

        # v is exclusive, so the last position in range is v - 1
        u_block, u_offset = divmod(u, s)
        v_block, v_offset = divmod(v - 1, s)

        if u_block == v_block:
            return self._block_query(u_block, u_offset, v_offset + 1)

        # u's block is a full block here since a later block exists
        tail = self._block_query(u_block, u_offset, s)
        head = self._block_query(v_block, 0, v_offset + 1)

        if v_block - u_block == 1:
            # No whole block in between; the super array is not consulted
            return self._winner(tail, head)

        middle = int(self.super_indices[self.super_table.query(u_block + 1, v_block)])
        return self._winner(self._winner(tail, middle), head)

    def stats(self) -> Dict:
        stats = super().stats()
        stats.update({
            'block_size': self.block_size,
            'num_blocks': len(self.block_tables),
            'distinct_shapes': len(self.shape_tables),
        })
        return stats
