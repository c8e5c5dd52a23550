"""Unit tests for point primitives and the side predicate."""
from fractions import Fraction

import numpy as np
import pytest

from spikeguard.core.geometry import (
    as_points_array, envelope, orient, orient_vectorized, points_equal, side, sign, subtract_point,
)


class TestSign:
    """Test sign function."""

    def test_sign_values(self):
        assert sign(5) == 1
        assert sign(-0.25) == -1
        assert sign(0) == 0
        assert sign(0.0) == 0
        assert sign(-0.0) == 0

    def test_sign_tiny_nonzero(self):
        """Only an exact zero maps to 0."""
        assert sign(1e-300) == 1
        assert sign(-1e-300) == -1

    def test_sign_fraction(self):
        assert sign(Fraction(-1, 7)) == -1


class TestSubtractPoint:
    """Test subtract_point function."""

    def test_subtract_ints(self):
        assert subtract_point((3, 5), (1, 7)) == (2, -2)

    def test_subtract_numpy_rows(self):
        pts = np.array([[1.5, 2.0], [0.5, 4.0]])
        assert subtract_point(pts[0], pts[1]) == (1.0, -2.0)


class TestSide:
    """Test side predicate (left = 1, right = -1, colinear = 0)."""

    def test_left_right_colinear_ints(self):
        a, b = (0, 0), (2, 0)
        assert side((1, 1), a, b) == 1
        assert side((1, -1), a, b) == -1
        assert side((5, 0), a, b) == 0

    def test_orient_sign_matches_side(self):
        a, b, c = (0.0, 0.0), (1.0, 0.0), (0.3, 0.7)
        assert orient(a, b, c) > 0
        assert side(c, a, b) == 1

    def test_tiny_float_offset_is_not_colinear(self):
        """Only an exact zero orientation counts as colinear, at any scale."""
        assert side((1.0, 1e-20), (0.0, 0.0), (2.0, 0.0)) == 1
        assert side((5e-9, 1e-9), (0.0, 0.0), (1e-8, 0.0)) == 1
        assert side((5e-9, -1e-9), (0.0, 0.0), (1e-8, 0.0)) == -1
        assert side((5e-9, 0.0), (0.0, 0.0), (1e-8, 0.0)) == 0

    def test_float_small_offset_is_not_colinear(self):
        assert side((1.0, 1e-6), (0.0, 0.0), (2.0, 0.0)) == 1

    def test_fraction_exact(self):
        third = Fraction(1, 3)
        assert side((third / 2, third / 2), (0, 0), (third, third)) == 0
        assert side((third / 2, third), (0, 0), (third, third)) == 1


def test_points_equal():
    assert points_equal((1, 2), (1.0, 2.0))
    assert not points_equal((1, 2), (1, 3))


def test_orient_vectorized_matches_scalar():
    a = np.array([[0, 0], [0, 0], [1, 1]])
    b = np.array([[2, 0], [2, 0], [3, 3]])
    c = np.array([[1, 1], [1, -1], [5, 5]])
    res = orient_vectorized(a, b, c)
    assert res.tolist() == [orient(a[i], b[i], c[i]) for i in range(3)]
    assert res.tolist() == [2, -2, 0]


def test_as_points_array_shapes():
    assert as_points_array([]).shape == (0, 2)
    assert as_points_array([[0, 1], [2, 3]]).shape == (2, 2)
    with pytest.raises(ValueError):
        as_points_array([[0, 1, 2]])
    with pytest.raises(ValueError):
        as_points_array([1, 2, 3])


def test_envelope():
    rings = [[(0, 1), (4, -2)], [(2, 7)]]
    assert envelope(rings) == (0, -2, 4, 7)
    assert envelope([[], []]) is None
