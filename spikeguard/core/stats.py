"""Cleaning statistics data structures and presentation utilities."""
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Dict, Any


@dataclass
class CleanStats:
    rings: int = 0
    points_in: int = 0
    points_out: int = 0
    duplicates_removed: int = 0
    spikes_removed: int = 0
    # rings reduced to nothing (spikes only)
    rings_collapsed: int = 0

    def merge(self, other: 'CleanStats') -> 'CleanStats':
        """Add the counters of ``other`` into this instance and return it."""
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))
        return self

    def to_dict(self) -> Dict[str, Any]:
        removed = self.duplicates_removed + self.spikes_removed
        return {
            'rings': self.rings,
            'points_in': self.points_in,
            'points_out': self.points_out,
            'duplicates_removed': self.duplicates_removed,
            'spikes_removed': self.spikes_removed,
            'rings_collapsed': self.rings_collapsed,
            'removed_rate': (removed / self.points_in) if self.points_in else 0.0,
        }


def format_stats_table(stats_dict) -> str:
    """Return a human readable multi-line table summarizing cleaning stats.

    ``stats_dict`` maps a label (e.g. a file or layer name) to a
    ``CleanStats.to_dict()`` mapping.
    """
    if not stats_dict:
        return "<no stats>"
    header = ["name", "rings", "in", "out", "dups", "spikes", "collapsed", "removed%"]
    rows = []
    for name in sorted(stats_dict.keys()):
        s = stats_dict[name]
        rows.append([
            str(name), str(s['rings']), str(s['points_in']), str(s['points_out']),
            str(s['duplicates_removed']), str(s['spikes_removed']), str(s['rings_collapsed']),
            f"{s['removed_rate'] * 100.0:6.2f}",
        ])
    col_w = [len(h) for h in header]
    for r in rows:
        for i,v in enumerate(r):
            if len(v) > col_w[i]: col_w[i] = len(v)
    def fmt(r):
        return " ".join(r[i].rjust(col_w[i]) for i in range(len(r)))
    lines = [fmt(header), "-" * (sum(col_w) + len(col_w) - 1)] + [fmt(r) for r in rows]
    return "\n".join(lines)


__all__ = ['CleanStats', 'format_stats_table']
