"""Logging helpers for spikeguard.

Messages go to the 'spikeguard' logger family, which is configured here
without touching the process root logger.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> None:
    """Send 'spikeguard' records to stdout at ``level``.

    A stdout handler replaces the package's NullHandler on first use, and
    records stop propagating to the root logger.
    """
    pkg_root = logging.getLogger('spikeguard')
    if all(isinstance(h, logging.NullHandler) for h in pkg_root.handlers):
        for h in list(pkg_root.handlers):
            pkg_root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    pkg_root.setLevel(_to_level(level))


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Logger ``name``; without ``level`` it inherits from 'spikeguard'."""
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
