"""
Ordered accumulation kernels shared by Vector and Matrix.

numpy.sum and numpy.dot use pairwise or BLAS-blocked summation, whose
rounding differs from a plain left-to-right loop. Products here must be
reproducible bit-for-bit against an index-ascending loop that starts
from zero, so every reduction goes through numpy.cumsum, which is
strictly sequential, and keeps the final partial sum.

All kernels compute in the dtype of their inputs; no promotion to
float64 happens for float32 data.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


def ordered_sum(
    terms: NDArray[np.floating[Any]],
    axis: int = -1,
) -> NDArray[np.floating[Any]]:
    """
    Left-to-right sum along one axis.

    Equivalent to ``acc = 0; for t in terms: acc += t`` along ``axis``.
    cumsum starts from the first term rather than from +0, so +0 is added
    to the final partial sum; this only matters when every term is -0.0,
    where the loop yields +0.0.

    Args:
        terms: Array of addends
        axis: Reduction axis

    Returns:
        Array with ``axis`` removed (a scalar for 1D input)
    """
    running = np.cumsum(terms, axis=axis, dtype=terms.dtype)
    return np.take(running, -1, axis=axis) + terms.dtype.type(0)


def ordered_dot(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> np.floating:
    """
    Dot product of two 1D arrays accumulated in ascending index order.

    Returns:
        Scalar of the common dtype
    """
    total = ordered_sum(a * b)
    return total.dtype.type(total)


def grid_times_vector(
    grid: NDArray[np.floating[Any]],
    x: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Row-wise products of an (M, N) grid with an N-vector.

    ``out[j] = sum_i grid[j, i] * x[i]``, accumulated in ascending i.
    """
    return ordered_sum(grid * x[np.newaxis, :], axis=1)


def vector_times_grid(
    x: NDArray[np.floating[Any]],
    grid: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Column-wise products of an M-vector with an (M, N) grid.

    ``out[i] = sum_j x[j] * grid[j, i]``, accumulated in ascending j.
    """
    return ordered_sum(x[:, np.newaxis] * grid, axis=0)
