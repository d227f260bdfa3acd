"""
Matrix[T, N, M]: N columns by M rows of floating-point scalars of type T.

Storage is a flat array of N*M elements. Logical element (column i,
row j) lives at flat index ``i + N*j``; every operation here (flat
construction, pair indexing, printing, both products) uses that one
convention. Internally the flat store is read as an (M, N) grid whose
row j is ``store[N*j : N*j + N]``, i.e. ``grid[j, i] == m[i, j]``.

Products with vectors:
    m * v   (v: Vector[T, N]) -> Vector[T, M], out[j] = sum_i m[i, j] * v[i]
    v * m   (v: Vector[T, M]) -> Vector[T, N], out[i] = sum_j v[j] * m[i, j]

``@`` is accepted as a synonym for both.
"""

from __future__ import annotations

from typing import Any, ClassVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from conjugate.core.container import FixedContainer, format_scalar
from conjugate.core.exceptions import DimensionError, ValidationError
from conjugate.core.kernels import grid_times_vector, vector_times_grid
from conjugate.core.validation import check_dimension, check_index
from conjugate.vector import Vector


class Matrix(FixedContainer):
    """
    Fixed-size matrix with column-major flat storage.

    Specialize with ``Matrix[T, N, M]``: T a floating dtype, N the number
    of columns, M the number of rows.

    Indexing:
        m[k], m[k] = x        flat, unchecked
        m[i, j], m[i, j] = x  column i, row j, unchecked: i and j are
                              not validated, an out-of-range column
                              lands in a neighbouring row
        m.at(k), m.at(i, j)   checked, IndexOutOfBoundsError
        m.set_at(k, x), m.set_at((i, j), x)

    Attributes:
        dtype: Scalar type
        n: Number of columns
        m: Number of rows
    """

    __slots__ = ()

    n: ClassVar[int] = 0
    m: ClassVar[int] = 0

    _specializations: ClassVar[dict] = {}

    @classmethod
    def _normalize_parameters(cls, params: tuple) -> tuple:
        if len(params) != 3:
            raise ValidationError(
                f"Matrix takes 3 parameters [T, N, M], got {len(params)}"
            )
        scalar_type, n, m = params
        return (
            cls._check_scalar_type(scalar_type),
            check_dimension(n, 'Matrix N (columns)'),
            check_dimension(m, 'Matrix M (rows)'),
        )

    @classmethod
    def _shape_attributes(cls, n: int, m: int) -> dict[str, Any]:
        return {'n': n, 'm': m, '_flat_size': n * m}

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build from M rows of N values, ``rows[j][i]`` landing at (i, j).

        Raises:
            ValidationError: If rows are ragged or not numeric
            DimensionError: If the grid is not M x N
        """
        try:
            grid = np.asarray(rows)
        except (ValueError, TypeError) as e:
            raise ValidationError(f"rows: cannot convert to array: {e}") from e

        if grid.shape != (cls.m, cls.n):
            raise DimensionError(
                f"rows: expected shape ({cls.m}, {cls.n}) (rows, columns), "
                f"got {grid.shape}"
            )
        return cls(grid.reshape(-1))

    @property
    def shape(self) -> tuple[int, int]:
        """(columns, rows)."""
        return (self.n, self.m)

    def _grid(self) -> NDArray[np.floating[Any]]:
        return self._data.reshape(self.m, self.n)

    # -------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------

    def _pair(self, index: tuple) -> tuple[Any, Any]:
        if len(index) != 2:
            raise ValidationError(
                f"index: expected a (column, row) pair, got {len(index)} values"
            )
        return index

    def __getitem__(self, index):
        if isinstance(index, tuple):
            i, j = self._pair(index)
            return self._data[i + self.n * j]
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            i, j = self._pair(index)
            self._data[i + self.n * j] = value
        else:
            self._data[index] = value

    def _checked_flat(self, index: Any) -> int:
        if isinstance(index, tuple):
            i, j = self._pair(index)
            i = check_index(i, self.n, 'column')
            j = check_index(j, self.m, 'row')
            return i + self.n * j
        return check_index(index, self._flat_size, 'index')

    def at(self, index: Any, row: Any = None) -> np.floating:
        """
        Checked element read: ``at(k)`` flat, ``at(i, j)`` by column and row.

        Raises:
            IndexOutOfBoundsError: If k is not in [0, N*M), i not in
                [0, N) or j not in [0, M)
        """
        if row is not None:
            index = (index, row)
        return self._data[self._checked_flat(index)]

    def row(self, j: int) -> Vector:
        """Copy of row j as a Vector[T, N]."""
        j = check_index(j, self.m, 'row')
        return Vector[self.dtype, self.n]._wrap(self._grid()[j].copy())

    def column(self, i: int) -> Vector:
        """Copy of column i as a Vector[T, M]."""
        i = check_index(i, self.n, 'column')
        return Vector[self.dtype, self.m]._wrap(self._grid()[:, i].copy())

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy as an (M, N) array, one row per line."""
        return self._grid().copy()

    # -------------------------------------------------------------------
    # Products with vectors
    # -------------------------------------------------------------------

    def _check_vector(self, vector: Vector, length: int, operation: str) -> None:
        expected = Vector[self.dtype, length]
        if type(vector) is not expected:
            raise DimensionError(
                f"{operation}: {type(self).__name__} requires {expected.__name__}, "
                f"got {type(vector).__name__}"
            )

    def __mul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_vector(other, self.n, 'matrix * vector')
        result = grid_times_vector(self._grid(), other._data)
        return Vector[self.dtype, self.m]._wrap(result)

    def __rmul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_vector(other, self.m, 'vector * matrix')
        result = vector_times_grid(other._data, self._grid())
        return Vector[self.dtype, self.n]._wrap(result)

    __matmul__ = __mul__
    __rmatmul__ = __rmul__

    def __str__(self) -> str:
        lines = [f"{self._flat_size}\n", "\n"]
        for j in range(self.m):
            cells = ','.join(format_scalar(self[i, j]) for i in range(self.n))
            lines.append(f"[{cells}]\n")
        return ''.join(lines)
