"""Public package API for spikeguard.

This facade provides a flat import surface on top of the internal
implementation package ``spikeguard.core``.

Example
-------
    from spikeguard import point_is_spike_or_equal, get_rescale_policy

The deeper modules (``spikeguard.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("spikeguard")
except _NotFound:  # pragma: no cover - source checkout without install
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_geom = _imp('spikeguard.core.geometry')
_const = _imp('spikeguard.core.constants')
_robust = _imp('spikeguard.core.robustness')
_spikes = _imp('spikeguard.core.spikes')
_clean = _imp('spikeguard.core.cleaning')
_stats = _imp('spikeguard.core.stats')
_config = _imp('spikeguard.core.config')
_io = _imp('spikeguard.core.io')
_log = _imp('spikeguard.core.logging_utils')

# Predicate
point_is_spike_or_equal = _spikes.point_is_spike_or_equal
spike_or_equal_mask = _spikes.spike_or_equal_mask
find_spike = _spikes.find_spike
has_spikes = _spikes.has_spikes

# Collaborators
side = _geom.side
sign = _geom.sign
subtract_point = _geom.subtract_point

# Robustness policies
RobustPolicy = _robust.RobustPolicy
NO_RESCALE = _robust.NO_RESCALE
rescale_policy = _robust.rescale_policy
get_rescale_policy = _robust.get_rescale_policy
recalculate = _robust.recalculate

# Cleaning
append_no_dups_or_spikes = _clean.append_no_dups_or_spikes
remove_spikes = _clean.remove_spikes
remove_spikes_polygon = _clean.remove_spikes_polygon
clean_rings = _clean.clean_rings
CleanConfig = _config.CleanConfig
CleanStats = _stats.CleanStats
format_stats_table = _stats.format_stats_table

# I/O and logging
read_rings_json = _io.read_rings_json
write_rings_json = _io.write_rings_json
configure_logging = _log.configure_logging
get_logger = _log.get_logger

# Namespace submodules
geometry = _geom
constants = _const
robustness = _robust
spikes = _spikes
cleaning = _clean
io = _io

__all__ = [
    '__version__',
    # predicate
    'point_is_spike_or_equal', 'spike_or_equal_mask', 'find_spike', 'has_spikes',
    'side', 'sign', 'subtract_point',
    # robustness
    'RobustPolicy', 'NO_RESCALE', 'rescale_policy', 'get_rescale_policy', 'recalculate',
    # cleaning
    'append_no_dups_or_spikes', 'remove_spikes', 'remove_spikes_polygon', 'clean_rings',
    'CleanConfig', 'CleanStats', 'format_stats_table',
    # io / logging
    'read_rings_json', 'write_rings_json', 'configure_logging', 'get_logger',
    # submodules
    'geometry', 'constants', 'robustness', 'spikes', 'cleaning', 'io',
]
