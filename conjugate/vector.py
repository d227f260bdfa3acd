"""
Vector[T, N]: fixed-length vector of N floating-point scalars of type T.

    >>> import numpy as np
    >>> from conjugate import Vector
    >>> V3 = Vector[np.float32, 3]
    >>> a = V3([1.0, 2.0, 3.0])
    >>> b = V3(2.0)                 # broadcast fill
    >>> float(a.dot(b))
    12.0
    >>> print(a + b, end='')
    [3,4,5]
"""

from __future__ import annotations

from typing import Any, ClassVar

import numpy as np

from conjugate.core.container import FixedContainer, format_scalar
from conjugate.core.kernels import ordered_dot
from conjugate.core.validation import check_dimension, check_scalar
from conjugate.core.exceptions import ValidationError


class Vector(FixedContainer):
    """
    Fixed-length vector.

    Specialize with ``Vector[T, N]`` where T is a floating dtype and N a
    positive int. Instances support ``+``, ``-``, scaling by a real
    scalar on either side, ``dot`` (also ``@``), and tolerance-based
    ``==`` / ``!=``.

    Attributes:
        dtype: Scalar type (class attribute of the specialization)
        n: Number of elements (class attribute of the specialization)
    """

    __slots__ = ()

    n: ClassVar[int] = 0

    _specializations: ClassVar[dict] = {}

    @classmethod
    def _normalize_parameters(cls, params: tuple) -> tuple:
        if len(params) != 2:
            raise ValidationError(
                f"Vector takes 2 parameters [T, N], got {len(params)}"
            )
        scalar_type, n = params
        return (cls._check_scalar_type(scalar_type), check_dimension(n, 'Vector N'))

    @classmethod
    def _shape_attributes(cls, n: int) -> dict[str, Any]:
        return {'n': n, '_flat_size': n}

    def __mul__(self, other):
        if not check_scalar(other):
            return NotImplemented
        return self._wrap(self._data * self.dtype.type(other))

    __rmul__ = __mul__

    def dot(self, other: Vector) -> np.floating:
        """
        Dot product ``sum_i self[i] * other[i]``.

        Accumulated left to right in the vector's scalar type, so the
        result is reproducible bit-for-bit against an index-ascending
        loop.

        Raises:
            DimensionError: If other is not the same specialization
        """
        self._check_operand(other, 'dot')
        return ordered_dot(self._data, other._data)

    def __matmul__(self, other):
        if isinstance(other, Vector):
            return self.dot(other)
        return NotImplemented

    def __str__(self) -> str:
        return '[' + ','.join(format_scalar(x) for x in self._data) + ']\n'
