"""Robustness policies for the second-opinion pass of the spike predicate.

A policy is a small strategy object: an ``enabled`` flag plus a
``recalculate`` callable mapping an input point to its robust
representation. The rescale policy maps floating point coordinates of a
known envelope onto a grid of integers, where orientation and sign tests are
exact.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Tuple

from .constants import RESCALE_RANGE
from .geometry import envelope, get, make_point

__all__ = [
    'RobustPolicy', 'NO_RESCALE', 'rescale_policy', 'get_rescale_policy',
    'rescale_multiplier', 'recalculate',
]


def _identity(point):
    return point


@dataclass(frozen=True)
class RobustPolicy:
    """Gate plus recalculation strategy for robust re-evaluation.

    Attributes
    ----------
    enabled : bool
        When False the robust pass is skipped entirely.
    recalculate : callable
        ``recalculate(point) -> point`` in the robust representation. Must be
        defined for every finite input point.
    """
    enabled: bool
    recalculate: Callable[[Any], Any] = _identity


NO_RESCALE = RobustPolicy(enabled=False)


def recalculate(point, policy: RobustPolicy):
    """Robust representation of ``point`` under ``policy``."""
    return policy.recalculate(point)


def _rescale_point(fp_min: Tuple[float, float], int_min: Tuple[int, int], multiplier: int, point):
    return make_point(
        int_min[0] + int(round((get(point, 0) - fp_min[0]) * multiplier)),
        int_min[1] + int(round((get(point, 1) - fp_min[1]) * multiplier)),
    )


def rescale_policy(fp_min, int_min, multiplier: int) -> RobustPolicy:
    """Enabled policy mapping ``v -> int_min + round((v - fp_min) * multiplier)`` per axis."""
    fp = (get(fp_min, 0), get(fp_min, 1))
    ip = (int(get(int_min, 0)), int(get(int_min, 1)))
    return RobustPolicy(enabled=True, recalculate=partial(_rescale_point, fp, ip, int(multiplier)))


def rescale_multiplier(extent) -> int:
    """Integer scale factor bringing ``extent`` to roughly RESCALE_RANGE units.

    Extents that are zero or already at least RESCALE_RANGE keep a factor of 1.
    """
    if extent == 0 or extent >= RESCALE_RANGE:
        return 1
    return int(math.floor(0.5 + RESCALE_RANGE / extent))


def get_rescale_policy(*rings) -> RobustPolicy:
    """Build a rescale policy from the envelope of the given rings.

    Raises
    ------
    ValueError
        If the rings hold no points or the envelope is not finite.
    """
    env = envelope(rings)
    if env is None:
        raise ValueError("cannot build a rescale policy from empty input")
    if not all(math.isfinite(v) for v in env):
        raise ValueError(f"cannot build a rescale policy from non-finite envelope {env}")
    min_x, min_y, max_x, max_y = env
    extent = max(max_x - min_x, max_y - min_y)
    multiplier = rescale_multiplier(extent)
    min_coordinate = int(-extent * multiplier / 2)
    return rescale_policy((min_x, min_y), (min_coordinate, min_coordinate), multiplier)
