"""
Range Minimum Query Interface

Every RMQ solver in this package follows the same contract:
- One-time preprocessing over an immutable 1-D sequence
- Repeatable argmin queries over half-open ranges [u, v)
- Deterministic tie-breaking between equal values
"""

from typing import Dict, Sequence

import numpy as np

# Tie-break policies: which of two equal candidates a solver keeps
LATER = 'later'
EARLIER = 'earlier'
TIE_BREAKS = (LATER, EARLIER)


def check_tie_break(tie_break: str) -> str:
    """Return tie_break unchanged, or raise ValueError if it is unknown."""
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie-break policy {tie_break!r}, "
                         f"expected one of {TIE_BREAKS}")
    return tie_break


def as_values(sequence: Sequence) -> np.ndarray:
    """
    View a caller-owned sequence as a 1-D numpy array.

    An ndarray is used as-is (no copy); other sequences are converted once.

    Raises:
        ValueError: if the sequence is empty or not one-dimensional
    """
    values = np.asarray(sequence)
    if values.ndim != 1:
        raise ValueError(f"RMQ input must be one-dimensional, got shape {values.shape}")
    if len(values) == 0:
        raise ValueError("RMQ input must contain at least one element")
    return values


def check_plus_minus_one(values: np.ndarray):
    """
    Verify that adjacent elements differ by exactly one.

    This is O(n), so solvers only call it when asked to validate.

    Raises:
        ValueError: at the first position violating the property
    """
    # Signed, so unsigned input cannot wrap around
    steps = np.diff(values.astype(np.result_type(values.dtype, np.int64)))
    bad = np.flatnonzero(np.abs(steps) != 1)
    if len(bad) > 0:
        i = int(bad[0])
        raise ValueError(f"Input is not a ±1 sequence: values[{i}]={values[i]!r}, "
                         f"values[{i + 1}]={values[i + 1]!r}")


def pick(values, a, b, tie_break: str):
    """
    Choose between candidate index a (from the earlier window) and b
    (from the later window).

    Works elementwise when a and b are index arrays.
    """
    if tie_break == LATER:
        return np.where(values[a] < values[b], a, b)
    return np.where(values[a] <= values[b], a, b)


class RangeMinimumQuery:
    """
    Base class for RMQ solvers.

    Subclasses build their tables in __init__ and implement query().
    Range preconditions are asserted, so they cost nothing under python -O.
    """

    def __init__(self, sequence: Sequence, tie_break: str = LATER):
        """
        Args:
            sequence: Immutable, totally ordered 1-D input (n >= 1)
            tie_break: LATER or EARLIER
        """
        self.values = as_values(sequence)
        self.tie_break = check_tie_break(tie_break)

    def __len__(self) -> int:
        return len(self.values)

    def _check_range(self, u: int, v: int):
        assert 0 <= u < v <= len(self.values), \
            f"invalid range [{u}, {v}) for input of length {len(self.values)}"

    def _winner(self, a: int, b: int) -> int:
        """Scalar form of pick() for two candidates with a <= b."""
        if self.tie_break == LATER:
            return a if self.values[a] < self.values[b] else b
        return a if self.values[a] <= self.values[b] else b

    def query(self, u: int, v: int) -> int:
        """
        Index of a minimal element in [u, v).

        Args:
            u: Start index (inclusive)
            v: End index (exclusive), u < v

        Returns:
            Index i in [u, v) with values[i] minimal over the range
        """
        raise NotImplementedError

    def min_value(self, u: int, v: int):
        """Minimum value over [u, v)."""
        return self.values[self.query(u, v)]

    def stats(self) -> Dict:
        """Get statistics about the preprocessed structure."""
        return {
            'solver': type(self).__name__,
            'n': len(self.values),
            'tie_break': self.tie_break,
        }
