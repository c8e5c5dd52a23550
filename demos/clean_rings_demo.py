#!/usr/bin/env python3
"""
Small demo: read rings from JSON, strip duplicate vertices and spikes,
print a stats table and optionally write the cleaned rings back out.

Without --input a built-in square with a spike on its top edge is used.
"""
from __future__ import annotations

import argparse

from spikeguard.core.cleaning import clean_rings
from spikeguard.core.config import CleanConfig
from spikeguard.core.io import read_rings_json, write_rings_json
from spikeguard.core.logging_utils import configure_logging, get_logger
from spikeguard.core.stats import format_stats_table


def square_with_spike():
    return [[
        (0.0, 0.0), (4.0, 0.0), (4.0, 4.0),
        (2.0, 4.0), (2.0, 8.0), (2.0, 4.0),  # spike up from the top edge
        (0.0, 4.0), (0.0, 0.0),
    ]]


def main():
    ap = argparse.ArgumentParser(description='Remove duplicate vertices and spikes from rings')
    ap.add_argument('--input', type=str, default=None, help='JSON file with rings (default: built-in example)')
    ap.add_argument('--output', type=str, default=None, help='Write cleaned rings to this JSON file')
    ap.add_argument('--open', action='store_true', help='Treat rings as open paths')
    ap.add_argument('--no-rescale', action='store_true', help='Disable the robust rescale second pass')
    ap.add_argument('--keep-empty', action='store_true', help='Keep rings that collapse to nothing')
    ap.add_argument('--log-level', type=str, default='INFO')
    args = ap.parse_args()

    configure_logging(args.log_level)
    log = get_logger('spikeguard.demo')

    rings = read_rings_json(args.input) if args.input else square_with_spike()
    cfg = CleanConfig(closed=not args.open, use_rescale=not args.no_rescale,
                      drop_empty=not args.keep_empty)
    cleaned, stats = clean_rings(rings, cfg)

    print(format_stats_table({args.input or 'example': stats.to_dict()}))
    if args.output:
        write_rings_json(args.output, cleaned)
        log.info('wrote %s', args.output)
    else:
        for ring in cleaned:
            print(ring)


if __name__ == '__main__':
    main()
