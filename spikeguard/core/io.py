"""Lightweight JSON I/O for rings.

Accepted input layouts:
- a list of rings, each a list of ``[x, y]`` pairs
- an object ``{"rings": [...]}`` with the same ring list

The writer always emits the object layout. Coordinates round-trip as JSON
numbers, so integer input stays integer.
"""
from __future__ import annotations

import json
from typing import List

from .logging_utils import get_logger

__all__ = ['read_rings_json', 'write_rings_json']

logger = get_logger('spikeguard.io')


def _parse_rings(data, source: str) -> List[list]:
    if isinstance(data, dict):
        if 'rings' not in data:
            raise ValueError(f"{source}: JSON object has no 'rings' key")
        data = data['rings']
    if not isinstance(data, list):
        raise ValueError(f"{source}: expected a list of rings, got {type(data).__name__}")
    rings = []
    for i, ring in enumerate(data):
        if not isinstance(ring, list):
            raise ValueError(f"{source}: ring {i} is not a list")
        pts = []
        for j, p in enumerate(ring):
            if (not isinstance(p, (list, tuple)) or len(p) != 2
                    or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in p)):
                raise ValueError(f"{source}: ring {i} point {j} is not an [x, y] pair: {p!r}")
            pts.append((p[0], p[1]))
        rings.append(pts)
    return rings


def read_rings_json(filepath: str) -> List[list]:
    """Read rings from a JSON file.

    Returns
    -------
    list of list of (x, y) tuples

    Raises
    ------
    ValueError
        If the file is empty, is not JSON, or has an unexpected layout.
    FileNotFoundError
        If the file doesn't exist.
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        text = f.read()
    if not text.strip():
        raise ValueError(f"Empty file: {filepath}")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"{filepath}: invalid JSON ({e})") from e
    rings = _parse_rings(data, filepath)
    logger.debug('read %d rings from %s', len(rings), filepath)
    return rings


def write_rings_json(filepath: str, rings) -> None:
    payload = {'rings': [[[p[0], p[1]] for p in ring] for ring in rings]}
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(payload, f)
    logger.debug('wrote %d rings to %s', len(payload['rings']), filepath)
