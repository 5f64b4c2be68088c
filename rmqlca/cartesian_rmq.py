"""
Optimal RMQ via Cartesian Tree + LCA

General RMQ reduces to LCA: in the Cartesian tree of an array, the
minimum of any range [u, v] sits at the LCA of the nodes for u and v.
The LCA is in turn answered by EulerLCA on top of the ±1 BlockRMQ, so
arbitrary arrays get O(n) preprocessing and O(1) queries.

Tie-breaking:
- EARLIER: equal values are not popped off the rightmost path, so
  earlier equal elements stay ancestors and the first minimum is returned
- LATER: equal values are popped, so the last minimum is returned
"""

import logging
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

from rmqlca.block_rmq import BlockRMQ
from rmqlca.euler_lca import EulerLCA
from rmqlca.rmq import EARLIER, LATER, RangeMinimumQuery, check_tie_break
from rmqlca.tree import Tree

logger = logging.getLogger(__name__)

NO_CHILD = -1


def build_cartesian_tree(values: Sequence,
                         tie_break: str = EARLIER) -> Tuple[int, List[int], List[int]]:
    """
    Build the Cartesian tree of values left to right.

    Nodes are array positions; the rightmost path is kept as a stack of
    positions, so no parent pointers are needed.

    Args:
        values: Input array (n >= 1)
        tie_break: EARLIER keeps equal ancestors, LATER pops them

    Returns:
        (root, left, right) where left[i] / right[i] is the child position
        of node i, or NO_CHILD
    """
    check_tie_break(tie_break)
    n = len(values)
    left = [NO_CHILD] * n
    right = [NO_CHILD] * n
    root = 0
    rightmost_path = [0]

    for i in range(1, n):
        value = values[i]
        if tie_break == LATER:
            while rightmost_path and values[rightmost_path[-1]] >= value:
                rightmost_path.pop()
        else:
            while rightmost_path and values[rightmost_path[-1]] > value:
                rightmost_path.pop()

        if not rightmost_path:
            # New overall root; the old root becomes its only child
            left[i] = root
            root = i
        else:
            # New right child of the top; its old right child moves under i
            top = rightmost_path[-1]
            left[i] = right[top]
            right[top] = i
        rightmost_path.append(i)

    return root, left, right


class CartesianRMQ(RangeMinimumQuery):
    """
    General RMQ through the Cartesian tree and EulerLCA.

    Preprocessing: O(n)
    Query: O(1)
    """

    def __init__(self, sequence: Sequence, tie_break: str = EARLIER,
                 rmq_factory: Callable[..., RangeMinimumQuery] = BlockRMQ):
        """
        Args:
            sequence: Input values (n >= 1), no ±1 restriction
            tie_break: EARLIER (first minimum) or LATER (last minimum)
            rmq_factory: RMQ class used by EulerLCA over the depth array
        """
        super().__init__(sequence, tie_break)
        n = len(self.values)

        root, left, right = build_cartesian_tree(self.values, self.tie_break)

        # Copy the finished shape into a Tree; node values are
        # (value, original index), children in left-then-right order
        self.tree = Tree()
        self.position_to_node = np.empty(n, dtype=np.intp)
        stack = [(root, None)]
        while stack:
            position, parent = stack.pop()
            node = self.tree.add((self.values[position], position), parent)
            self.position_to_node[position] = node
            # Pushed right first so the left child is added first
            for child in (right[position], left[position]):
                if child != NO_CHILD:
                    stack.append((child, node))

        self.lca = EulerLCA(self.tree, rmq_factory=rmq_factory)

        logger.debug(f"CartesianRMQ built: n={n}, root={root}, "
                     f"height={self.lca.stats()['max_depth']}")

    def query(self, u: int, v: int) -> int:
        self._check_range(u, v)
        node = self.lca.query(int(self.position_to_node[u]),
                              int(self.position_to_node[v - 1]))
        return self.tree.value(node)[1]

    def stats(self) -> Dict:
        stats = super().stats()
        stats.update(self.lca.stats())
        return stats
