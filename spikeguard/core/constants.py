"""Rescale constants and ring size limits.

Keeps the handful of magic numbers used by the robust rescale policy and
the cleaning functions in one place so they are not scattered as literals.
"""
from __future__ import annotations

# Rescale policy: the envelope of the input is mapped onto roughly this many
# integer units along its largest extent.
RESCALE_RANGE: int = 1_000_000

# Minimum vertex counts before spike removal is attempted
MIN_CLOSED_RING_POINTS: int = 4
MIN_OPEN_RING_POINTS: int = 3

__all__ = [
    'RESCALE_RANGE',
    'MIN_CLOSED_RING_POINTS',
    'MIN_OPEN_RING_POINTS',
]
