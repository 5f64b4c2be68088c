"""
Lowest Common Ancestor via Euler Tour + ±1 RMQ

The Euler tour emits a node on arrival and again after each child
subtree, so consecutive depths differ by exactly one. The LCA of u and v
is the shallowest node on the tour between their first visits, which is
a ±1 RMQ over the depth array.

Features:
- O(n) preprocessing with the default BlockRMQ
- O(1) LCA queries
- Any RangeMinimumQuery class can stand in for BlockRMQ
"""

import logging
from typing import Any, Callable, Dict

import numpy as np

from rmqlca.block_rmq import BlockRMQ
from rmqlca.rmq import RangeMinimumQuery
from rmqlca.tree import Tree

logger = logging.getLogger(__name__)


class EulerLCA:
    """
    Lowest Common Ancestor using Euler Tour + RMQ.

    Attributes:
        euler_tour: Node ids in tour order, length 2n - 1
        depths: Depth of each tour entry
        first_occurrence: Tour position of each node's first visit,
            indexed by node id
    """

    def __init__(self, tree: Tree,
                 rmq_factory: Callable[..., RangeMinimumQuery] = BlockRMQ):
        """
        Build Euler tour and RMQ structure for LCA queries.

        Args:
            tree: Tree with a root
            rmq_factory: RMQ class (or callable) applied to the depth array
        """
        if tree.root is None:
            raise ValueError("Cannot build LCA structure over an empty tree")

        self.tree = tree
        n = len(tree)
        self.euler_tour = np.empty(2 * n - 1, dtype=np.intp)
        self.depths = np.empty(2 * n - 1, dtype=np.intp)
        self.first_occurrence = np.full(n, -1, dtype=np.intp)

        self._walk()
        self.rmq = rmq_factory(self.depths)

        logger.debug(f"EulerLCA built: nodes={n}, tour_length={len(self.euler_tour)}")

    def _walk(self):
        """Iterative DFS filling the tour, depth and first-occurrence arrays."""
        children = self.tree.children
        pos = 0

        root = self.tree.root
        self.first_occurrence[root] = pos
        self.euler_tour[pos] = root
        self.depths[pos] = 0
        pos += 1

        # (node, index of the next child to visit)
        stack = [(root, 0)]
        while stack:
            node, next_child = stack[-1]
            depth = len(stack) - 1

            if next_child < len(children[node]):
                stack[-1] = (node, next_child + 1)
                child = children[node][next_child]
                self.first_occurrence[child] = pos
                self.euler_tour[pos] = child
                self.depths[pos] = depth + 1
                pos += 1
                stack.append((child, 0))
            else:
                stack.pop()
                if stack:
                    # Back at the parent after a child subtree
                    parent = stack[-1][0]
                    self.euler_tour[pos] = parent
                    self.depths[pos] = depth - 1
                    pos += 1

    def query(self, u: int, v: int) -> int:
        """
        Find Lowest Common Ancestor of nodes u and v in O(1) time.

        Args:
            u: First node id
            v: Second node id

        Returns:
            LCA node id
        """
        assert 0 <= u < len(self.first_occurrence) and 0 <= v < len(self.first_occurrence), \
            f"nodes {u}, {v} are not in this tree"

        l = int(self.first_occurrence[u])
        r = int(self.first_occurrence[v])
        if l > r:
            l, r = r, l

        # [l, r + 1) is never empty, even when u == v
        return int(self.euler_tour[self.rmq.query(l, r + 1)])

    def query_value(self, u: int, v: int) -> Any:
        """Value stored at the LCA of u and v."""
        return self.tree.value(self.query(u, v))

    def depth(self, node: int) -> int:
        """Get depth of a node."""
        return int(self.depths[self.first_occurrence[node]])

    def distance(self, u: int, v: int) -> int:
        """
        Number of edges on the path from u to v.

        distance = depth(u) + depth(v) - 2 * depth(lca(u, v))
        """
        return self.depth(u) + self.depth(v) - 2 * self.depth(self.query(u, v))

    def stats(self) -> Dict:
        """Get statistics about the LCA structure."""
        return {
            'num_nodes': len(self.first_occurrence),
            'euler_tour_length': len(self.euler_tour),
            'max_depth': int(self.depths.max()),
        }
