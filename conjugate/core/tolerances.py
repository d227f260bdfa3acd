"""
Tolerance constants for element-wise comparison.

Equality between containers is tolerance-based: two scalars match when
they are identical or when their absolute difference is within
EQUALITY_ATOL. The tolerance is absolute and fixed; there is no relative
component.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for element-wise comparison."""
    atol: float
    name: str
    description: str

    def cast(self, dtype: np.dtype) -> np.floating:
        """Tolerance expressed in the given scalar type."""
        return np.dtype(dtype).type(self.atol)


# Absolute tolerance used by Vector and Matrix equality
EQUALITY_ATOL: float = 1e-3

EQUALITY = ToleranceTier(
    atol=EQUALITY_ATOL,
    name='equality',
    description='exact match, else absolute difference <= 1e-3',
)


def within_tolerance(a, b, tier: ToleranceTier = EQUALITY) -> np.ndarray:
    """
    Element-wise closeness mask.

    An element matches when ``a == b`` (this also covers equal
    infinities) or when ``|a - b| <= atol`` with atol cast to the
    operands' dtype. NaN never matches.

    Args:
        a: First array
        b: Second array, same shape and dtype as ``a``
        tier: Tolerance to apply

    Returns:
        Boolean array of the broadcast shape
    """
    a = np.asarray(a)
    b = np.asarray(b)
    atol = tier.cast(np.result_type(a, b))
    # inf - inf produces NaN; those pairs are settled by the exact check
    with np.errstate(invalid='ignore', over='ignore'):
        return (a == b) | (np.abs(a - b) <= atol)
