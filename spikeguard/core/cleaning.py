"""Ring and polygon cleaning built on the spike/duplicate predicate.

Rings are lists of points. Closed rings repeat their first point at the end
(``[a, b, c, a]``); open rings do not. All functions return new lists, except
``append_no_dups_or_spikes`` which extends its ring in place.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import CleanConfig
from .constants import MIN_CLOSED_RING_POINTS, MIN_OPEN_RING_POINTS
from .geometry import as_points_array, points_equal
from .logging_utils import get_logger
from .robustness import NO_RESCALE, RobustPolicy, get_rescale_policy
from .spikes import point_is_spike_or_equal
from .stats import CleanStats

__all__ = ['append_no_dups_or_spikes', 'remove_spikes', 'remove_spikes_polygon', 'clean_rings']


def _as_point_list(ring) -> list:
    if isinstance(ring, np.ndarray):
        return [tuple(p) for p in as_points_array(ring).tolist()]
    pts = list(ring)
    for p in pts:
        if len(p) != 2:
            raise ValueError(f"expected 2D points, got {p!r}")
    return pts


def _count_removed(stats: Optional[CleanStats], removed, kept) -> None:
    if stats is None:
        return
    if points_equal(removed, kept):
        stats.duplicates_removed += 1
    else:
        stats.spikes_removed += 1


def append_no_dups_or_spikes(ring: list, point, robust_policy: Optional[RobustPolicy] = None,
                             stats: Optional[CleanStats] = None) -> None:
    """Append ``point`` to ``ring`` unless it duplicates the last point.

    If the new point forms a spike with the two points before it, the
    penultimate point is removed; this repeats because the now-penultimate
    point may cause a spike too.
    """
    if ring and points_equal(ring[-1], point):
        if stats is not None:
            stats.duplicates_removed += 1
        return
    ring.append(point)
    while len(ring) >= 3 and point_is_spike_or_equal(point, ring[-3], ring[-2], robust_policy):
        _count_removed(stats, ring[-2], point)
        del ring[-2]
    # a spike removal can leave [p, p]
    if len(ring) == 2 and points_equal(ring[0], ring[1]):
        ring.pop()
        if stats is not None:
            stats.duplicates_removed += 1


def remove_spikes(ring, closed: bool = True, robust_policy: Optional[RobustPolicy] = None,
                  stats: Optional[CleanStats] = None) -> list:
    """Return a copy of ``ring`` without duplicate vertices and spikes.

    Rings below the minimum size (4 points closed, 3 open) are returned
    unchanged. A closed ring made of spikes only collapses to ``[]``.

    Raises
    ------
    ValueError
        If the ring does not consist of 2D points.
    """
    pts = _as_point_list(ring)
    if stats is not None:
        stats.rings += 1
        stats.points_in += len(pts)
    minimum = MIN_CLOSED_RING_POINTS if closed else MIN_OPEN_RING_POINTS
    if len(pts) < minimum:
        if stats is not None:
            stats.points_out += len(pts)
        return pts

    cleaned: list = []
    for p in pts:
        append_no_dups_or_spikes(cleaned, p, robust_policy, stats)

    if closed:
        # Drop the closing point so the wrap-around can be checked uniformly
        if len(cleaned) > 1 and points_equal(cleaned[0], cleaned[-1]):
            cleaned.pop()
        found = True
        while found:
            found = False
            # Spike at the first point
            while len(cleaned) >= 3 and point_is_spike_or_equal(cleaned[0], cleaned[-2], cleaned[-1], robust_policy):
                _count_removed(stats, cleaned[-1], cleaned[0])
                cleaned.pop()
                found = True
            # Spike at the second point
            while len(cleaned) >= 3 and point_is_spike_or_equal(cleaned[1], cleaned[-1], cleaned[0], robust_policy):
                _count_removed(stats, cleaned[0], cleaned[1])
                cleaned.pop(0)
                found = True
        if len(cleaned) < 3:
            # Ring with only spikes
            cleaned = []
            if stats is not None:
                stats.rings_collapsed += 1
        else:
            cleaned.append(cleaned[0])

    if stats is not None:
        stats.points_out += len(cleaned)
    return cleaned


def remove_spikes_polygon(shell, holes: Iterable = (), closed: bool = True,
                          robust_policy: Optional[RobustPolicy] = None,
                          stats: Optional[CleanStats] = None) -> Tuple[list, List[list]]:
    """Clean the shell and every hole of a polygon.

    Holes collapsing to nothing are dropped. Returns ``(shell, holes)``.
    """
    new_shell = remove_spikes(shell, closed, robust_policy, stats)
    new_holes = []
    for hole in holes:
        cleaned = remove_spikes(hole, closed, robust_policy, stats)
        if cleaned:
            new_holes.append(cleaned)
    return new_shell, new_holes


def clean_rings(rings: Sequence, config: Optional[CleanConfig] = None) -> Tuple[List[list], CleanStats]:
    """Remove duplicates and spikes from a batch of rings.

    With ``config.use_rescale`` one rescale policy is built from the envelope
    of all rings, so every ring is re-checked on the same integer grid.
    Returns ``(cleaned_rings, stats)``.
    """
    cfg = config or CleanConfig()
    log = get_logger('spikeguard.cleaning', cfg.log_level)
    rings = [_as_point_list(r) for r in rings]
    policy = NO_RESCALE
    if cfg.use_rescale and any(rings):
        policy = get_rescale_policy(*rings)
    stats = CleanStats()
    out = []
    for idx, ring in enumerate(rings):
        cleaned = remove_spikes(ring, cfg.closed, policy, stats)
        if not cleaned and cfg.drop_empty:
            log.debug('ring %d collapsed (%d points, spikes only)', idx, len(ring))
            continue
        out.append(cleaned)
    log.info('cleaned %d rings: %d -> %d points (%d duplicates, %d spikes removed)',
             stats.rings, stats.points_in, stats.points_out,
             stats.duplicates_removed, stats.spikes_removed)
    return out, stats
