"""
Exception hierarchy for conjugate.

All exceptions inherit from ConjugateError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class ConjugateError(Exception):
    """Base exception for all conjugate errors."""
    pass


class ValidationError(ConjugateError):
    """
    Input validation failed.

    Raised when a scalar type, a dimension or element data supplied by
    the caller is unusable (non-floating dtype, non-positive dimension,
    non-numeric content, unspecialized container class).
    """
    pass


class DimensionError(ValidationError):
    """
    Element counts or container shapes are inconsistent.

    Raised when construction data has the wrong number of elements, or
    when two operands belong to different specializations
    (e.g. Vector[float32, 3] + Vector[float32, 4]).
    """
    pass


class IndexOutOfBoundsError(ConjugateError, IndexError):
    """
    Checked element access outside the container.

    Only the checked accessors (``at`` / ``set_at``) raise this. It is
    also an ``IndexError`` so generic Python code can catch it.

    Attributes:
        index: The offending index (int or (column, row) pair)
        bound: The exclusive upper bound that was violated
    """

    def __init__(
        self,
        message: str,
        index: int | tuple[int, int] | None = None,
        bound: int | tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class OverflowCastWarning(RuntimeWarning):
    """
    Finite input became infinite when cast to the container's scalar type.

    Emitted (not raised) during construction or element assignment, e.g.
    storing 1e300 in a float32 container.
    """
    pass
