"""
Fixed-size container base shared by Vector and Matrix.

A container family (Vector, Matrix) is never instantiated directly. It is
first specialized with a scalar type and its dimensions:

    Vec3 = Vector[np.float32, 3]
    v = Vec3([1.0, 2.0, 3.0])

Specialization validates the parameters once and returns a cached
subclass, so ``Vector[np.float32, 3] is Vector[np.float32, 3]``. Shape
compatibility between operands is a comparison of these classes: two
containers combine only if they are instances of the same
specialization, otherwise DimensionError is raised before any element
is touched.

Every instance owns a private flat numpy array of exactly ``size``
elements. Construction and copy() always allocate a new array; no two
instances ever share storage.

Access comes in two tiers:
    - ``c[k]`` / ``c[k] = x``: unchecked, straight numpy indexing; a
      slice such as ``c[0:2]`` is a numpy view sharing the store, like
      view(), so writes through it mutate the container
    - ``c.at(k)`` / ``c.set_at(k, x)``: validated, raises
      IndexOutOfBoundsError outside [0, size)
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterator

import numpy as np
from numpy.typing import NDArray

from conjugate.core.exceptions import DimensionError, ValidationError
from conjugate.core.tolerances import EQUALITY, within_tolerance
from conjugate.core.validation import (
    cast_to_dtype,
    check_elements,
    check_index,
    check_scalar,
    check_scalar_type,
)


def format_scalar(value: Any) -> str:
    """Render a scalar the way a default C++ stream does (%g, 6 digits)."""
    return format(float(value), 'g')


def _rebuild(family: type, parameters: tuple, data: NDArray) -> FixedContainer:
    """Unpickling hook: re-specialize the family and rebuild the instance."""
    return family[parameters](data)


class FixedContainer:
    """
    Base class for fixed-size containers of floating-point scalars.

    Subclasses define ``_specializations`` (their own cache dict),
    ``_normalize_parameters`` and ``_shape_attributes``.
    """

    __slots__ = ('_data',)

    # Set on specialized subclasses only
    dtype: ClassVar[np.dtype | None] = None
    _family: ClassVar[type | None] = None
    _parameters: ClassVar[tuple] = ()
    _flat_size: ClassVar[int] = 0

    _specializations: ClassVar[dict]

    # Mutable, tolerance-compared: not hashable
    __hash__ = None

    # numpy scalars and arrays must defer to our reflected operators
    # instead of treating the container as a sequence
    __array_ufunc__ = None

    # -------------------------------------------------------------------
    # Specialization
    # -------------------------------------------------------------------

    def __class_getitem__(cls, params):
        if cls.dtype is not None:
            raise ValidationError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple):
            params = (params,)

        key = cls._normalize_parameters(params)
        cached = cls._specializations.get(key)
        if cached is not None:
            return cached

        dtype, *dims = key
        name = f"{cls.__name__}[{dtype.name}, {', '.join(str(d) for d in dims)}]"
        namespace = {
            '__slots__': (),
            '__module__': cls.__module__,
            '__qualname__': name,
            'dtype': dtype,
            '_family': cls,
            '_parameters': key,
        }
        namespace.update(cls._shape_attributes(*dims))
        specialized = type(name, (cls,), namespace)
        # setdefault keeps a single class per key if two threads race here
        return cls._specializations.setdefault(key, specialized)

    @classmethod
    def _normalize_parameters(cls, params: tuple) -> tuple:
        raise NotImplementedError

    @classmethod
    def _shape_attributes(cls, *dims: int) -> dict[str, Any]:
        raise NotImplementedError

    @classmethod
    def _check_scalar_type(cls, scalar_type: Any) -> np.dtype:
        return check_scalar_type(scalar_type, f"{cls.__name__} scalar type")

    # -------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------

    def __init__(self, values: Any = None):
        """
        Build a container.

        Args:
            values: None for all zeros, a real scalar for a broadcast
                fill, or a flat sequence of exactly ``size`` elements
                (another container must be of the same specialization)

        Raises:
            ValidationError: If the class is not specialized or values
                are not real numbers
            DimensionError: If values have the wrong element count
        """
        cls = type(self)
        if cls.dtype is None:
            raise ValidationError(
                f"{cls.__name__} must be specialized before use, "
                f"e.g. {cls.__name__}[np.float64, ...]"
            )

        if values is None:
            data = np.zeros(cls._flat_size, dtype=cls.dtype)
        elif check_scalar(values):
            data = cast_to_dtype(
                np.full(cls._flat_size, values), cls.dtype, 'values', stacklevel=3
            )
        elif isinstance(values, FixedContainer):
            cls._check_operand(values, 'construction')
            data = values._data.copy()
        else:
            data = check_elements(values, cls.dtype, cls._flat_size, 'values')

        self._data = data

    @classmethod
    def _wrap(cls, data: NDArray[np.floating[Any]]) -> FixedContainer:
        """Adopt an already-validated array without copying."""
        obj = object.__new__(cls)
        obj._data = data
        return obj

    def copy(self) -> FixedContainer:
        """Independent copy with its own backing store."""
        return self._wrap(self._data.copy())

    def __copy__(self) -> FixedContainer:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> FixedContainer:
        return self.copy()

    def __reduce__(self):
        return (_rebuild, (self._family, self._parameters, self._data.copy()))

    # -------------------------------------------------------------------
    # Size and access
    # -------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Total number of scalars held."""
        return self._flat_size

    def __len__(self) -> int:
        return self._flat_size

    def __getitem__(self, index):
        # slices are views into the store, not copies
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        self._data[index] = value

    def _checked_flat(self, index: Any) -> int:
        return check_index(index, self._flat_size, 'index')

    def at(self, index: Any) -> np.floating:
        """
        Checked element read.

        Raises:
            IndexOutOfBoundsError: If index is not in [0, size)
        """
        return self._data[self._checked_flat(index)]

    def set_at(self, index: Any, value: Any) -> None:
        """
        Checked element write.

        Raises:
            IndexOutOfBoundsError: If index is not in [0, size)
            ValidationError: If value is not a real scalar
        """
        flat = self._checked_flat(index)
        if not check_scalar(value):
            raise ValidationError(
                f"value: expected a real scalar, got {type(value).__name__}"
            )
        self._data[flat] = cast_to_dtype(np.asarray(value), self.dtype, 'value')

    def __iter__(self) -> Iterator[np.floating]:
        return iter(self._data)

    def view(self) -> NDArray[np.floating[Any]]:
        """
        Writable flat view of the backing store.

        Writes through the view mutate this container. The view must not
        be used to resize or rebind the store.
        """
        return self._data.view()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Flat copy of the elements."""
        return self._data.copy()

    # -------------------------------------------------------------------
    # Comparison and arithmetic
    # -------------------------------------------------------------------

    @classmethod
    def _check_operand(cls, other: Any, operation: str) -> None:
        if type(other) is not cls:
            other_name = type(other).__name__
            raise DimensionError(
                f"{operation}: operands must both be {cls.__name__}, got {other_name}"
            )

    def __eq__(self, other):
        if not isinstance(other, FixedContainer):
            return NotImplemented
        self._check_operand(other, '==')
        return bool(np.all(within_tolerance(self._data, other._data, EQUALITY)))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __add__(self, other):
        if not isinstance(other, FixedContainer):
            return NotImplemented
        self._check_operand(other, '+')
        return self._wrap(self._data + other._data)

    def __sub__(self, other):
        if not isinstance(other, FixedContainer):
            return NotImplemented
        self._check_operand(other, '-')
        return self._wrap(self._data - other._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"
