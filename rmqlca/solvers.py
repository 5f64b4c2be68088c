"""Solver registry: build any RMQ solver by name."""

from typing import Dict, Sequence, Type

from rmqlca.block_rmq import BlockRMQ
from rmqlca.cartesian_rmq import CartesianRMQ
from rmqlca.naive_table import NaiveTable
from rmqlca.rmq import RangeMinimumQuery
from rmqlca.sparse_table import SparseTable

SOLVERS: Dict[str, Type[RangeMinimumQuery]] = {
    'naive': NaiveTable,
    'sparse': SparseTable,
    'block': BlockRMQ,
    'cartesian': CartesianRMQ,
}


def build_rmq(name: str, sequence: Sequence, **options) -> RangeMinimumQuery:
    """
    Construct the solver registered under name.

    Args:
        name: One of SOLVERS
        sequence: Input values
        **options: Passed to the solver (tie_break, validate for 'block', ...)
    """
    if name not in SOLVERS:
        raise ValueError(f"Unknown solver {name!r}, expected one of {sorted(SOLVERS)}")
    return SOLVERS[name](sequence, **options)
