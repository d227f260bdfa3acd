"""
Input validation utilities for conjugate.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion beyond casting numeric data to the
      container's scalar type
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from conjugate.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    OverflowCastWarning,
    ValidationError,
)


def check_scalar_type(scalar_type: Any, name: str) -> np.dtype:
    """
    Validate a container scalar type.

    Accepts anything numpy understands as a dtype (``np.float32``,
    ``float``, ``'float64'``, ``np.dtype('f4')``) provided it is a real
    floating-point type.

    Args:
        scalar_type: Candidate scalar type
        name: Parameter name for error messages

    Returns:
        The normalized numpy dtype

    Raises:
        ValidationError: If the type is not a floating-point dtype
    """
    if scalar_type is None:
        # np.dtype(None) silently means float64
        raise ValidationError(f"{name}: scalar type is required, got None")

    try:
        dtype = np.dtype(scalar_type)
    except TypeError as e:
        raise ValidationError(
            f"{name}: {scalar_type!r} is not a numpy scalar type: {e}"
        ) from e

    if not np.issubdtype(dtype, np.floating):
        raise ValidationError(
            f"{name}: scalar type must be floating-point, got {dtype}"
        )
    return dtype


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a container dimension.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: dimension must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name}: dimension must be positive, got {value}")
    return int(value)


def check_scalar(value: Any) -> bool:
    """
    Check whether a value is a real scalar usable for broadcast or scaling.

    bool is excluded even though Python treats it as an integer.

    Returns:
        True if ``value`` is a real, non-boolean number
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def cast_to_dtype(
    values: NDArray[Any],
    dtype: np.dtype,
    name: str,
    stacklevel: int = 3,
) -> NDArray[np.floating[Any]]:
    """
    Cast numeric data to a container scalar type.

    Values that were finite before the cast and are infinite after it
    (float64 1e300 stored as float32) are kept, as a float store would
    keep them, but an OverflowCastWarning is emitted.

    Args:
        values: Numeric array
        dtype: Target floating dtype
        name: Parameter name for warning messages
        stacklevel: Passed to warnings.warn so the warning points at user code

    Returns:
        New array of the target dtype (never a view of ``values``)
    """
    with np.errstate(over='ignore'):
        result = np.array(values, dtype=dtype, copy=True)

    if result.size and np.issubdtype(values.dtype, np.number):
        overflowed = np.isfinite(values) & ~np.isfinite(result)
        if np.any(overflowed):
            warnings.warn(
                f"{name}: {int(np.sum(overflowed))} finite value(s) overflowed "
                f"to inf when cast to {dtype}",
                OverflowCastWarning,
                stacklevel=stacklevel,
            )
    return result


def check_elements(
    data: ArrayLike,
    dtype: np.dtype,
    size: int,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate flat element data and convert it to a container store.

    Args:
        data: One-dimensional array-like of real numbers
        dtype: Container scalar type
        size: Required number of elements
        name: Parameter name for error messages

    Returns:
        Freshly allocated 1D array of ``dtype`` with ``size`` elements

    Raises:
        ValidationError: If data is not numeric or is complex
        DimensionError: If data is not 1D or has the wrong length
    """
    try:
        array = np.asarray(data)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if array.dtype == object and array.ndim == 1 and all(check_scalar(x) for x in array):
        # Python ints beyond int64 land in object arrays
        try:
            array = array.astype(np.float64)
        except OverflowError as e:
            raise ValidationError(f"{name}: value too large for a float: {e}") from e
    if array.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if not np.issubdtype(array.dtype, np.number) or np.issubdtype(array.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-real dtype {array.dtype}, expected real numeric data"
        )
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D data, got {array.ndim}D with shape {array.shape}"
        )
    if array.shape[0] != size:
        raise DimensionError(
            f"{name}: expected {size} elements, got {array.shape[0]}"
        )

    return cast_to_dtype(array, dtype, name, stacklevel=4)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Validate a checked-access index.

    Negative indices are rejected: the checked tier addresses positions
    in [0, bound) only.

    Args:
        index: Candidate index
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfBoundsError: If index is not an integer in [0, bound)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, numbers.Integral):
        raise IndexOutOfBoundsError(
            f"{name}: index must be an integer, got {type(index).__name__}",
            index=index,
            bound=bound,
        )
    if not 0 <= index < bound:
        raise IndexOutOfBoundsError(
            f"{name}: index {index} out of range [0, {bound})",
            index=int(index),
            bound=bound,
        )
    return int(index)
