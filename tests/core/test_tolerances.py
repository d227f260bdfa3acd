"""
Tests for tolerance constants and within_tolerance.

Validates:
    - EQUALITY tier values, immutability and dtype casting
    - within_tolerance: exact-then-absolute rule
    - Infinities equal only to themselves, NaN equal to nothing
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from conjugate.core.tolerances import (
    EQUALITY,
    EQUALITY_ATOL,
    ToleranceTier,
    within_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# ToleranceTier
# ═══════════════════════════════════════════════════════════════════════


class TestToleranceTier:
    """Tiers are frozen module constants cast to the container dtype."""

    def test_equality_tier(self):
        assert EQUALITY.atol == EQUALITY_ATOL == 1e-3
        assert EQUALITY.name == 'equality'

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            EQUALITY.atol = 1.0

    def test_cast_to_float32(self):
        atol = EQUALITY.cast(np.float32)
        assert isinstance(atol, np.float32)
        assert atol == np.float32(1e-3)


# ═══════════════════════════════════════════════════════════════════════
# within_tolerance
# ═══════════════════════════════════════════════════════════════════════


class TestWithinTolerance:
    """Elements match exactly or within an absolute tolerance."""

    def test_exact_match(self):
        assert np.all(within_tolerance(np.array([1.0, -2.0]), np.array([1.0, -2.0])))

    def test_inside_tolerance(self):
        assert np.all(within_tolerance(np.array([1.0]), np.array([1.0005])))

    def test_outside_tolerance(self):
        assert not np.any(within_tolerance(np.array([1.0]), np.array([1.01])))

    def test_tolerance_is_absolute(self):
        """A large magnitude does not widen the tolerance."""
        assert not np.any(within_tolerance(np.array([1e6]), np.array([1e6 + 1.0])))

    def test_custom_tier(self):
        loose = ToleranceTier(atol=0.5, name='loose', description='test tier')
        assert np.all(within_tolerance(np.array([1.0]), np.array([1.4]), loose))


# ═══════════════════════════════════════════════════════════════════════
# Non-finite values
# ═══════════════════════════════════════════════════════════════════════


class TestNonFinite:
    """inf and NaN follow the exact-match path only."""

    def test_equal_infinities_match(self):
        a = np.array([np.inf, -np.inf])
        assert np.all(within_tolerance(a, a.copy()))

    def test_opposite_infinities_do_not_match(self):
        assert not np.any(within_tolerance(np.array([np.inf]), np.array([-np.inf])))

    def test_nan_never_matches(self):
        assert not np.any(within_tolerance(np.array([np.nan]), np.array([np.nan])))
