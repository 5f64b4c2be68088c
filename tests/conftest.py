"""Shared fixtures for the RMQ / LCA tests."""

import numpy as np
import pytest


def first_min(values, u, v):
    """Brute-force first minimal index of values[u:v]."""
    return u + int(np.argmin(values[u:v]))


def last_min(values, u, v):
    """Brute-force last minimal index of values[u:v]."""
    return v - 1 - int(np.argmin(values[u:v][::-1]))


@pytest.fixture
def brute():
    return {'earlier': first_min, 'later': last_min}


@pytest.fixture
def pm_array():
    """±1 walk of length 200 (lots of repeated values)."""
    rng = np.random.default_rng(7)
    steps = rng.choice([-1, 1], size=199)
    return np.concatenate([[0], np.cumsum(steps)])


@pytest.fixture
def random_array():
    """Arbitrary array of length 150 drawn from a small range, so ties are common."""
    rng = np.random.default_rng(11)
    return rng.integers(0, 20, size=150)


@pytest.fixture
def sample_array():
    return [10, 8, 9, 2, 4, 5, 1, 16, 4, 7]
