"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from conjugate import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=[np.float32, np.float64], ids=['float32', 'float64'])
def dtype(request):
    """Scalar types every container behaviour is checked against."""
    return np.dtype(request.param)


@pytest.fixture
def ramp_vector(dtype):
    """Vector[T, 10] holding 1, 2, ..., 10."""
    v = Vector[dtype, 10](1.0)
    for i in range(v.size):
        v[i] += i
    return v


@pytest.fixture
def random_pair(rng, dtype):
    """Two random Vector[T, 50] instances."""
    V = Vector[dtype, 50]
    return V(rng.standard_normal(50)), V(rng.standard_normal(50))


@pytest.fixture
def indexed_matrix():
    """Matrix[float64, 4, 3] whose element (i, j) equals 10*i + j."""
    m = Matrix[np.float64, 4, 3]()
    for i in range(4):
        for j in range(3):
            m[i, j] = 10 * i + j
    return m
