"""Configuration objects for ring and polygon cleaning."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class CleanConfig:
    """Options for ``clean_rings``.

    Attributes
    ----------
    closed : bool
        Rings repeat their first point at the end and wrap around.
    use_rescale : bool
        Build a rescale policy from the envelope of all input rings and use
        it for the robust second pass of the spike predicate.
    drop_empty : bool
        Omit rings that collapse to nothing from the output.
    log_level : str, optional
        Level for the 'spikeguard.cleaning' logger; None inherits.
    """
    closed: bool = True
    use_rescale: bool = True
    drop_empty: bool = True
    log_level: Optional[str] = None


__all__ = ['CleanConfig']
