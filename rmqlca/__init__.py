"""
rmqlca - constant-time Range Minimum and Lowest Common Ancestor queries

Solvers:
- NaiveTable: O(n²) preprocessing, O(1) query
- SparseTable: O(n log n) preprocessing, O(1) query
- BlockRMQ: O(n) preprocessing, O(1) query, ±1 inputs only
- EulerLCA: LCA through the Euler tour and BlockRMQ
- CartesianRMQ: O(n) preprocessing, O(1) query for any array
"""

from rmqlca.block_rmq import BlockRMQ
from rmqlca.cartesian_rmq import CartesianRMQ
from rmqlca.euler_lca import EulerLCA
from rmqlca.naive_table import NaiveTable
from rmqlca.rmq import EARLIER, LATER, RangeMinimumQuery
from rmqlca.solvers import SOLVERS, build_rmq
from rmqlca.sparse_table import SparseTable
from rmqlca.tree import Tree

__version__ = "1.0.0"

__all__ = [
    'BlockRMQ', 'CartesianRMQ', 'EulerLCA', 'NaiveTable', 'SparseTable',
    'RangeMinimumQuery', 'Tree', 'SOLVERS', 'build_rmq', 'EARLIER', 'LATER',
]
