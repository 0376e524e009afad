#!/usr/bin/env python3
"""
Write Isla's catalog icons to disk.

Usage:
    # Write every icon to ./icons
    python isla/tools/export_icons.py

    # Pick the output directory and the icons
    python isla/tools/export_icons.py --out static/icons ck-wallet-icon-192.v1.png

    # Show the catalog / what would be written
    python isla/tools/export_icons.py --list
    python isla/tools/export_icons.py --dry-run
"""

import argparse
import sys
from pathlib import Path

ISLA_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = ISLA_DIR.parent
for path in (ROOT_DIR, ISLA_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from services.icon_cache import IconCache  # noqa: E402
from services.registry import get_icon_spec  # noqa: E402


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Export Isla's icon catalog as PNG files")
    parser.add_argument('names', nargs='*', help='Icons to export (default: all)')
    parser.add_argument('--out', default='icons', help='Output directory (default: icons)')
    parser.add_argument('--list', action='store_true', help='List the catalog and exit')
    parser.add_argument('--dry-run', action='store_true', help='Show what would be written')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    icon_cache = IconCache()

    if args.list:
        for name in icon_cache.names():
            spec = get_icon_spec(name)
            flags = [flag for flag in ('maskable', 'apple') if getattr(spec, flag)]
            print(f"{name}  {spec.size}x{spec.size}  {' '.join(flags)}".rstrip())
        return 0

    names = args.names or icon_cache.names()
    unknown = [name for name in names if not icon_cache.known(name)]
    if unknown:
        print(f"❌ Unknown icon(s): {', '.join(unknown)}", file=sys.stderr)
        return 1

    out_dir = Path(args.out)
    if not args.dry_run:
        out_dir.mkdir(parents=True, exist_ok=True)

    for name in names:
        target = out_dir / name
        if args.dry_run:
            print(f"Would write {target}")
            continue
        png = icon_cache.generate(name)
        target.write_bytes(png)
        print(f"✓ Wrote {target} ({len(png)} bytes)")

    return 0


if __name__ == '__main__':
    sys.exit(main())
