"""Spike / duplicate vertex predicate.

Checks if a point ("last_point") causes a spike with respect to the two
points of the segment just traversed (segment_a -> segment_b)::

    x-------x------x
    a       lp     b

Above, lp generates a spike w.r.t. segment (a, b): appending it after b means
walking back along the same line. Note the argument order: the last point
comes first, then (a, b).
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from .geometry import as_points_array, get, orient_vectorized, points_equal, side, sign, subtract_point
from .robustness import RobustPolicy, recalculate

__all__ = ['point_is_spike_or_equal', 'spike_or_equal_mask', 'find_spike', 'has_spikes']


def _spike_or_equal(last_point, segment_a, segment_b) -> bool:
    if side(last_point, segment_a, segment_b) != 0:
        return False

    # Colinear: equal to b?
    diff1 = subtract_point(last_point, segment_b)
    sgn_x1 = sign(get(diff1, 0))
    sgn_y1 = sign(get(diff1, 1))
    if sgn_x1 == 0 and sgn_y1 == 0:
        return True

    # Moving forward along a->b, or back?
    diff2 = subtract_point(segment_b, segment_a)
    sgn_x2 = sign(get(diff2, 0))
    sgn_y2 = sign(get(diff2, 1))
    if sgn_x2 == 0 and sgn_y2 == 0:
        # zero-length segment has no direction to reverse
        return False
    return sgn_x1 != sgn_x2 or sgn_y1 != sgn_y2


def point_is_spike_or_equal(last_point, segment_a, segment_b,
                            robust_policy: Optional[RobustPolicy] = None) -> bool:
    """True if appending ``last_point`` after ``segment_a -> segment_b`` gives a
    duplicate of ``segment_b`` or a spike.

    Without a policy only the input coordinates are used. With an enabled
    policy a negative answer is re-checked once on the recalculated (robust)
    points; a positive answer is never revisited.
    """
    if _spike_or_equal(last_point, segment_a, segment_b):
        return True

    if robust_policy is None or not robust_policy.enabled:
        return False

    return _spike_or_equal(
        recalculate(last_point, robust_policy),
        recalculate(segment_a, robust_policy),
        recalculate(segment_b, robust_policy),
    )


def spike_or_equal_mask(points) -> np.ndarray:
    """Vectorized base predicate over consecutive triples of an open path.

    points: (N,2) array-like
    Returns: (N,) bool array; element i (i >= 2) is
    ``point_is_spike_or_equal(points[i], points[i-2], points[i-1])``,
    elements 0 and 1 are False. Non-numeric input is evaluated as float64.
    """
    arr = as_points_array(points)
    if arr.dtype.kind == 'u':
        arr = arr.astype(np.int64)
    elif arr.dtype.kind not in 'if':
        arr = arr.astype(np.float64)
    n = arr.shape[0]
    mask = np.zeros((n,), dtype=bool)
    if n < 3:
        return mask
    a = arr[:-2]; b = arr[1:-1]; last = arr[2:]
    colinear = orient_vectorized(a, b, last) == 0
    s1 = np.sign(last - b)
    s2 = np.sign(b - a)
    equal = np.all(s1 == 0, axis=1)
    degenerate = np.all(s2 == 0, axis=1)
    reversed_ = np.any(s1 != s2, axis=1)
    mask[2:] = colinear & (equal | (reversed_ & ~degenerate))
    return mask


def find_spike(ring, closed: bool = True, robust_policy: Optional[RobustPolicy] = None) -> Optional[int]:
    """Index of the trailing point of the first degenerate triple, or None.

    Triples ``(ring[i-2], ring[i-1], ring[i])`` are tested in order of ``i``
    and the first ``i`` for which ``ring[i]`` is spike-or-equal with respect
    to the segment ``ring[i-2] -> ring[i-1]`` is returned. This is the point
    that walks back, not the spike apex: for ``[a, apex, a2]`` the result
    is 2 and the apex sits at ``i - 1`` (modulo the ring size).

    For closed rings a repeated closing point is ignored and ``i`` starts at
    0, so ``i = 0`` and ``i = 1`` test the wrap-around triples built from
    the end of the ring. Open rings start at ``i = 2``.
    """
    pts = list(ring)
    if closed and len(pts) > 1 and points_equal(pts[0], pts[-1]):
        pts.pop()
    n = len(pts)
    if n < 3:
        return None
    for i in (range(n) if closed else range(2, n)):
        if point_is_spike_or_equal(pts[i], pts[i - 2], pts[i - 1], robust_policy):
            return i
    return None


def has_spikes(ring, closed: bool = True, robust_policy: Optional[RobustPolicy] = None) -> bool:
    return find_spike(ring, closed, robust_policy) is not None
