"""
conjugate: fixed-dimension vectors and matrices of floating-point values.

Containers are specialized by scalar type and dimensions before use:

    Vector[T, N]      N scalars of floating dtype T
    Matrix[T, N, M]   N columns by M rows, column-major flat storage

Public API:
    Vector, Matrix    - container families
    ConjugateError    - base of all library exceptions
"""

__version__ = "0.1.0"

from conjugate.vector import Vector
from conjugate.matrix import Matrix
from conjugate.core.exceptions import (
    ConjugateError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    OverflowCastWarning,
)
from conjugate.core.tolerances import EQUALITY_ATOL

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "ConjugateError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "OverflowCastWarning",
    "EQUALITY_ATOL",
]
