"""Point primitives and the side (orientation) predicate.

Points are any 2-item indexable (tuple, list, numpy row). Scalar helpers keep
the coordinate type of their inputs, so Python ints and Fractions stay exact.
"""
from __future__ import annotations

import numpy as np

__all__ = [
    'get', 'make_point', 'subtract_point', 'sign', 'orient', 'side',
    'orient_vectorized', 'points_equal', 'envelope', 'as_points_array',
]


def get(point, axis: int):
    """Coordinate ``axis`` (0 = x, 1 = y) of ``point``."""
    return point[axis]


def make_point(x, y):
    return (x, y)


def subtract_point(p, q):
    """Component-wise difference ``p - q`` as a new point."""
    return make_point(get(p, 0) - get(q, 0), get(p, 1) - get(q, 1))


def sign(value) -> int:
    """-1, 0 or 1; zero only for an exact numeric zero."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def points_equal(p, q) -> bool:
    return get(p, 0) == get(q, 0) and get(p, 1) == get(q, 1)


def orient(a, b, c):
    """2D orientation (signed area * 2) of c relative to the directed line a->b.

    Positive when (a,b,c) are counter-clockwise, negative when clockwise,
    zero when colinear.
    """
    return ((get(b, 0) - get(a, 0)) * (get(c, 1) - get(a, 1))
            - (get(b, 1) - get(a, 1)) * (get(c, 0) - get(a, 0)))


def side(p, a, b) -> int:
    """Side of ``p`` with respect to the directed line ``a -> b``.

    Returns 1 for left, -1 for right and 0 for colinear. The orientation is
    compared against an exact zero for every coordinate type; float rounding
    noise is left to the robust rescale pass.
    """
    return sign(orient(a, b, p))


def orient_vectorized(a_pts, b_pts, c_pts):
    """Orientation of each c_pts[i] relative to the line a_pts[i] -> b_pts[i].

    All arguments are arrays of shape (M,2); returns an (M,) array.
    """
    a = np.asarray(a_pts); b = np.asarray(b_pts); c = np.asarray(c_pts)
    return (b[:, 0]-a[:, 0])*(c[:, 1]-a[:, 1]) - (b[:, 1]-a[:, 1])*(c[:, 0]-a[:, 0])


def as_points_array(points) -> np.ndarray:
    """Return ``points`` as an (N,2) numpy array, raising ValueError otherwise."""
    arr = np.asarray(points)
    if arr.size == 0:
        return arr.reshape((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array of points, got shape {arr.shape}")
    return arr


def envelope(rings):
    """Bounding box ``(min_x, min_y, max_x, max_y)`` over an iterable of rings.

    Returns None when no point is found.
    """
    min_x = min_y = max_x = max_y = None
    for ring in rings:
        for p in ring:
            x, y = get(p, 0), get(p, 1)
            if min_x is None:
                min_x = max_x = x
                min_y = max_y = y
                continue
            min_x = min(min_x, x); max_x = max(max_x, x)
            min_y = min(min_y, y); max_y = max(max_y, y)
    if min_x is None:
        return None
    return (min_x, min_y, max_x, max_y)
