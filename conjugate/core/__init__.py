"""
Core infrastructure for conjugate.

Shared pieces used by Vector and Matrix.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Equality tolerance constants
    kernels: Ordered (left-to-right) accumulation kernels
    container: Fixed-size container base and specialization machinery
"""

from conjugate.core.exceptions import (
    ConjugateError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    OverflowCastWarning,
)
from conjugate.core.tolerances import EQUALITY, EQUALITY_ATOL, ToleranceTier

__all__ = [
    # Exceptions
    "ConjugateError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "OverflowCastWarning",
    # Tolerances
    "EQUALITY",
    "EQUALITY_ATOL",
    "ToleranceTier",
]
